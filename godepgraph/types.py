from typing import Dict, Any
from dataclasses import dataclass
from pydantic import BaseModel


@dataclass
class SourceFile:
    """A file read from a source tree."""
    path: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


class RepositoryLocation(BaseModel):
    """A remote repository given as an https link and its ssh equivalent."""
    https_url: str
    ssh_url: str
    host: str
    owner_path: str


@dataclass
class RenderResult:
    """Files produced by a render."""
    graph_file: str
    diagram_file: str
    node_count: int
    edge_count: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "graph_file": self.graph_file,
            "diagram_file": self.diagram_file,
            "node_count": self.node_count,
            "edge_count": self.edge_count,
        }
