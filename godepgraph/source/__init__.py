"""
Read-only access to source trees, local or freshly cloned.
"""

from .tree import SourceTree
from .remote import RepositoryFetcher, load_ssh_key, parse_repository_url

__all__ = [
    'SourceTree',
    'RepositoryFetcher',
    'load_ssh_key',
    'parse_repository_url',
]
