"""
Extracts import paths from Go source files using Tree-sitter.
"""
from typing import List, Union

import tree_sitter_go as tsgo
from tree_sitter import Language, Parser

from ..errors import SourceSyntaxError
from ..utils.logger import app_logger

GO_LANGUAGE = Language(tsgo.language())

# Top-level nodes allowed before the first declaration
_HEADER_NODES = {"package_clause", "import_declaration", "comment"}
_STRING_NODES = {"interpreted_string_literal", "raw_string_literal"}


class ImportExtractor:
    """Parses the package clause and import section of a Go file."""

    def __init__(self):
        self.parser = Parser(GO_LANGUAGE)
        self.logger = app_logger.bind(component="import_extractor")

    def extract(self, content: Union[bytes, str], path: str = "") -> List[str]:
        """
        Returns the import paths of a file in source order.
        Errors after the import section are ignored.
        """
        if isinstance(content, str):
            content = content.encode("utf-8")

        tree = self.parser.parse(content)
        root = tree.root_node

        if root.type != "source_file":
            raise SourceSyntaxError("unparseable source file", path, 1)

        imports = []
        seen_package = False
        for node in root.named_children:
            if node.type == "ERROR":
                if not seen_package or node.text.lstrip().startswith(b"import"):
                    raise SourceSyntaxError("malformed import section", path, self._line(node))
                break
            if node.type not in _HEADER_NODES:
                break
            self._check_node(node, path)

            if node.type == "package_clause":
                if seen_package:
                    raise SourceSyntaxError("repeated package clause", path, self._line(node))
                seen_package = True
            elif node.type == "import_declaration":
                if not seen_package:
                    raise SourceSyntaxError("import before package clause", path, self._line(node))
                imports.extend(self._import_paths(node, path))

        if not seen_package:
            raise SourceSyntaxError("expected 'package' clause", path, 1)

        if root.has_error:
            self.logger.debug(f"Ignoring syntax errors after the import section of {path}")
        return imports

    def _import_paths(self, declaration, path: str) -> List[str]:
        specs = []
        for child in declaration.children:
            if child.type == "import_spec":
                specs.append(child)
            elif child.type == "import_spec_list":
                specs.extend(c for c in child.children if c.type == "import_spec")

        paths = []
        for spec in specs:
            literal = spec.child_by_field_name("path")
            if literal is None or literal.type not in _STRING_NODES:
                raise SourceSyntaxError("missing import path", path, self._line(spec))
            try:
                text = literal.text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise SourceSyntaxError("invalid UTF-8 in import path", path, self._line(spec)) from e
            if len(text) < 2:
                raise SourceSyntaxError(f"invalid import path {text!r}", path, self._line(spec))
            value = text[1:-1]
            if not value:
                raise SourceSyntaxError("empty import path", path, self._line(spec))
            paths.append(value)
        return paths

    def _check_node(self, node, path: str):
        if node.type == "ERROR" or node.is_missing or node.has_error:
            raise SourceSyntaxError("malformed import section", path, self._error_line(node))

    def _error_line(self, node) -> int:
        # Report the first offending descendant
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type == "ERROR" or current.is_missing:
                return self._line(current)
            stack.extend(reversed(current.children))
        return self._line(node)

    @staticmethod
    def _line(node) -> int:
        return node.start_point[0] + 1
