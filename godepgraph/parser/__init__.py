"""
Source parsing for Go files.
"""

from .imports import ImportExtractor

__all__ = ['ImportExtractor']
