"""Locates ``go.mod`` in a source tree and reads the module path from it."""

import posixpath
import re
from typing import List, Optional, Tuple, Union

from ..config import settings
from ..errors import ConfigParseError
from ..source.tree import SourceTree
from ..utils.logger import app_logger

_MODULE_DIRECTIVE = re.compile(r"^module(?=\s|\(|$)(.*)$")


def _strip_comment(line: str) -> str:
    in_quote = None
    for index, char in enumerate(line):
        if in_quote:
            if char == in_quote:
                in_quote = None
        elif char in ('"', '`'):
            in_quote = char
        elif line.startswith("//", index):
            return line[:index]
    return line


def _unquote(token: str, filename: str, lineno: int) -> str:
    if token[:1] in ('"', '`'):
        quote = token[0]
        if len(token) < 2 or not token.endswith(quote):
            raise ConfigParseError(f"{filename}:{lineno}: unterminated quoted module path")
        token = token[1:-1]
    elif len(token.split()) > 1:
        raise ConfigParseError(f"{filename}:{lineno}: unexpected tokens after module path: {token!r}")

    if not token.strip():
        raise ConfigParseError(f"{filename}:{lineno}: empty module path")
    return token


def parse_module_path(content: Union[bytes, str], filename: str = "go.mod") -> str:
    """Return the module path declared in a ``go.mod`` file."""
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigParseError(f"{filename}: not valid UTF-8: {e}") from e

    found: List[Tuple[int, str]] = []
    block_start: Optional[int] = None

    for lineno, raw in enumerate(content.splitlines(), start=1):
        line = _strip_comment(raw).strip()
        if not line:
            continue

        if block_start is not None:
            if line == ")":
                block_start = None
            else:
                found.append((lineno, line))
            continue

        match = _MODULE_DIRECTIVE.match(line)
        if not match:
            continue

        rest = match.group(1).strip()
        if rest == "(":
            block_start = lineno
            continue
        if rest.startswith("(") and rest.endswith(")"):
            rest = rest[1:-1].strip()
        found.append((lineno, rest))

    if block_start is not None:
        raise ConfigParseError(f"{filename}:{block_start}: unterminated module block")
    if not found:
        raise ConfigParseError(f"{filename}: no module directive found")
    if len(found) > 1:
        raise ConfigParseError(f"{filename}:{found[1][0]}: repeated module statement")

    lineno, token = found[0]
    if not token:
        raise ConfigParseError(f"{filename}:{lineno}: module directive has no path")
    return _unquote(token, filename, lineno)


class ModuleResolver:
    """Finds the module root name of a source tree."""

    def __init__(self, module_file_name: Optional[str] = None):
        self.module_file_name = module_file_name or settings.module_file_name
        self.logger = app_logger.bind(component="module_resolver")

    def find_module_file(self, tree: SourceTree) -> str:
        candidates = [
            path for path in tree.walk()
            if posixpath.basename(path) == self.module_file_name
        ]
        if not candidates:
            raise ConfigParseError(
                f"No {self.module_file_name} file found in {tree.root_path}"
            )

        candidates.sort(key=lambda path: (path.count("/"), path))
        if len(candidates) > 1:
            self.logger.warning(
                f"Found {len(candidates)} {self.module_file_name} files, "
                f"using {candidates[0]} and ignoring {', '.join(candidates[1:])}"
            )
        return candidates[0]

    def resolve(self, tree: SourceTree) -> str:
        """Return the module path declared by the tree's module file."""
        module_file = self.find_module_file(tree)
        module_root = parse_module_path(tree.read(module_file), module_file)
        self.logger.info(f"Module root: {module_root} (from {module_file})")
        return module_root
