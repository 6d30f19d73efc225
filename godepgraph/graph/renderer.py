"""
Renders a DependencyGraph with Graphviz.
"""
import subprocess
from pathlib import Path
from typing import Optional

import graphviz

from ..config import settings
from ..errors import PreconditionError, RenderError
from ..types import RenderResult
from ..utils.logger import app_logger
from .builder import DependencyGraph


def check_layout_tool() -> str:
    """Run ``dot -V`` and return the Graphviz version string."""
    try:
        version = graphviz.version()
    except graphviz.ExecutableNotFound as e:
        raise PreconditionError(f"Graphviz is not installed: {e}") from e
    except subprocess.CalledProcessError as e:
        raise PreconditionError(f"Graphviz 'dot -V' failed: {e}") from e
    return ".".join(str(part) for part in version)


class GraphRenderer:
    """Writes the DOT description of a graph and lays it out with an external engine."""

    def __init__(self, graph_file: Optional[str] = None, diagram_file: Optional[str] = None,
                 output_format: Optional[str] = None, engine: Optional[str] = None):
        self.graph_file = graph_file or settings.graph_file
        self.diagram_file = diagram_file or settings.diagram_file
        self.output_format = output_format or settings.output_format
        self.engine = engine or settings.layout_engine
        self.logger = app_logger.bind(component="renderer")

    def to_digraph(self, graph: DependencyGraph) -> graphviz.Digraph:
        """Nodes are packages; edges point from the dependency to its dependent."""
        digraph = graphviz.Digraph("G")
        for package in graph.nodes:
            digraph.node(package)
        for dependency, dependent in graph.edges():
            digraph.edge(dependency, dependent)
        return digraph

    def render(self, graph: DependencyGraph) -> RenderResult:
        digraph = self.to_digraph(graph)

        try:
            Path(self.graph_file).write_text(digraph.source, encoding="utf-8")
        except OSError as e:
            raise RenderError(f"Couldn't write {self.graph_file}: {e}") from e
        self.logger.info(f"Wrote graph description to {self.graph_file}")

        try:
            graphviz.render(
                self.engine,
                self.output_format,
                self.graph_file,
                outfile=self.diagram_file,
            )
        except ValueError as e:
            raise RenderError(f"Invalid layout settings: {e}") from e
        except graphviz.ExecutableNotFound as e:
            raise RenderError(f"Layout engine {self.engine!r} not found: {e}") from e
        except subprocess.CalledProcessError as e:
            raise RenderError(f"Layout engine {self.engine!r} failed: {e}") from e
        self.logger.info(f"Rendered diagram to {self.diagram_file}")

        return RenderResult(
            graph_file=self.graph_file,
            diagram_file=self.diagram_file,
            node_count=len(graph),
            edge_count=graph.edge_count(),
        )
