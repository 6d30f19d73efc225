"""
Builds the package dependency graph of a Go module.
"""
import posixpath
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from ..utils.logger import app_logger


def derive_package_name(module_root: str, file_relative_path: str) -> str:
    """Map a file to the package owning it: the module root joined with the file's directory."""
    directory = posixpath.dirname(file_relative_path)
    return posixpath.normpath(posixpath.join(module_root, directory))


class DependencyGraph:
    """Maps every package to the set of packages it imports.

    Every dependency is also a node, so there are no dangling edges.
    """

    def __init__(self):
        self._dependencies: Dict[str, Set[str]] = {}

    def add_package(self, package: str):
        self._dependencies.setdefault(package, set())

    def add_dependency(self, package: str, dependency: str):
        self.add_package(package)
        self.add_package(dependency)
        self._dependencies[package].add(dependency)

    def dependencies(self, package: str) -> Set[str]:
        return set(self._dependencies[package])

    @property
    def nodes(self) -> List[str]:
        return sorted(self._dependencies)

    def edges(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(dependency, dependent)`` pairs in sorted order."""
        for package in self.nodes:
            for dependency in sorted(self._dependencies[package]):
                yield dependency, package

    def edge_count(self) -> int:
        return sum(len(deps) for deps in self._dependencies.values())

    def to_dict(self) -> Dict[str, List[str]]:
        return {package: sorted(deps) for package, deps in sorted(self._dependencies.items())}

    def __contains__(self, package: str) -> bool:
        return package in self._dependencies

    def __len__(self) -> int:
        return len(self._dependencies)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DependencyGraph):
            return NotImplemented
        return self._dependencies == other._dependencies


class GraphBuilder:
    """Accumulates (package, imports) pairs into a DependencyGraph."""

    def __init__(self, graph: DependencyGraph = None):
        self.graph = graph if graph is not None else DependencyGraph()
        self.logger = app_logger.bind(component="graph_builder")

    def insert(self, package: str, imports: Iterable[str]):
        self.graph.add_package(package)
        for import_path in imports:
            self.graph.add_dependency(package, import_path)

    def build(self, stream: Iterable[Tuple[str, Iterable[str]]]) -> DependencyGraph:
        for package, imports in stream:
            self.insert(package, imports)
        self.logger.info(
            f"Dependency graph has {len(self.graph)} nodes and {self.graph.edge_count()} edges"
        )
        return self.graph
