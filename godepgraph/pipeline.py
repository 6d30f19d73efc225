"""
godepgraph pipeline.

A run goes through these steps, in order, and stops at the first error:
1. Check that the Graphviz layout tool is installed
2. Validate the repository link and load the ssh key
3. Shallow-clone the repository
4. Resolve the module root from go.mod
5. Extract imports from every Go file into a dependency graph
6. Write graph.dot and render the diagram
"""

from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .config import Settings, settings as default_settings
from .graph.builder import DependencyGraph, GraphBuilder, derive_package_name
from .graph.renderer import GraphRenderer, check_layout_tool
from .module.resolver import ModuleResolver
from .parser.imports import ImportExtractor
from .source.remote import RepositoryFetcher, load_ssh_key, parse_repository_url
from .source.tree import SourceTree
from .types import RenderResult
from .utils.logger import app_logger


class DependencyGraphPipeline:
    """Runs one clone-scan-render pass over a repository."""

    def __init__(self, config: Optional[Settings] = None, branches: Optional[List[str]] = None,
                 output_format: Optional[str] = None):
        self.config = config or default_settings
        self.branches = branches or self.config.branches
        self.output_format = output_format or self.config.output_format
        self.module_resolver = ModuleResolver(self.config.module_file_name)
        self.import_extractor = ImportExtractor()
        self.logger = app_logger.bind(component="pipeline")

    def run(self, location: str) -> RenderResult:
        version = check_layout_tool()
        self.logger.debug(f"Graphviz version {version}")

        repository = parse_repository_url(location, self.config.ssh_user)
        key_path = load_ssh_key(self.config.ssh_key_path)

        with RepositoryFetcher(key_path, self.branches, self.config.clone_depth) as fetcher:
            tree = fetcher.fetch(repository)
            graph = self.build_graph(tree)

        return self.create_renderer().render(graph)

    def create_renderer(self) -> GraphRenderer:
        diagram_file = str(Path(self.config.diagram_file).with_suffix(f".{self.output_format}"))
        return GraphRenderer(
            graph_file=self.config.graph_file,
            diagram_file=diagram_file,
            output_format=self.output_format,
            engine=self.config.layout_engine,
        )

    def build_graph(self, tree: SourceTree) -> DependencyGraph:
        module_root = self.module_resolver.resolve(tree)
        builder = GraphBuilder()
        return builder.build(self.package_imports(tree, module_root))

    def package_imports(self, tree: SourceTree, module_root: str) -> Iterator[Tuple[str, List[str]]]:
        """Yield the owning package and import paths of every source file."""
        count = 0
        for source_file in tree.files(self.config.source_extension):
            package = derive_package_name(module_root, source_file.path)
            imports = self.import_extractor.extract(source_file.content, source_file.path)
            self.logger.debug(f"{source_file.path} -> {package}: {len(imports)} imports")
            count += 1
            yield package, imports
        self.logger.info(f"Scanned {count} {self.config.source_extension} files")
