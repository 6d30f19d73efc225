"""
Graph module for building and rendering package dependency graphs.
"""

from .builder import DependencyGraph, GraphBuilder, derive_package_name
from .renderer import GraphRenderer, check_layout_tool

__all__ = [
    'DependencyGraph',
    'GraphBuilder',
    'derive_package_name',
    'GraphRenderer',
    'check_layout_tool',
]
