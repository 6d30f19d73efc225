"""
godepgraph: draw the package dependency graph of a Go repository.
"""

from .graph.builder import DependencyGraph, GraphBuilder, derive_package_name
from .pipeline import DependencyGraphPipeline

__all__ = [
    'DependencyGraph',
    'GraphBuilder',
    'derive_package_name',
    'DependencyGraphPipeline',
]

__version__ = "0.1.0"
