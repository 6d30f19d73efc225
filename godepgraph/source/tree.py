import os
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..config import settings
from ..errors import WalkError
from ..types import SourceFile
from ..utils.logger import app_logger


class SourceTree:
    """Read-only view over a directory tree."""

    def __init__(self, root_path: str, ignored_dirs: Optional[Iterable[str]] = None):
        self.root_path = Path(root_path).resolve()
        if ignored_dirs is None:
            ignored_dirs = settings.ignored_dirs
        self.ignored_dirs = set(ignored_dirs)
        self.logger = app_logger.bind(component="source_tree")

        if not self.root_path.is_dir():
            raise WalkError(f"Source tree root is not a directory: {self.root_path}")

    def walk(self, suffix: Optional[str] = None) -> Iterator[str]:
        """Yield relative POSIX paths of every file, in sorted order."""
        def on_error(error: OSError):
            raise WalkError(f"Error walking {error.filename}: {error.strerror}") from error

        for root, dirs, files in os.walk(self.root_path, onerror=on_error):
            # Remove ignored directories
            dirs[:] = sorted(d for d in dirs if d not in self.ignored_dirs)

            for file_name in sorted(files):
                if suffix is not None and not file_name.endswith(suffix):
                    continue
                file_path = Path(root) / file_name
                yield file_path.relative_to(self.root_path).as_posix()

    def read(self, relative_path: str) -> bytes:
        """Read the bytes of a file given its relative path."""
        file_path = self.root_path / relative_path
        try:
            with open(file_path, "rb") as f:
                return f.read()
        except OSError as e:
            raise WalkError(f"Error reading {relative_path}: {e}") from e

    def files(self, suffix: Optional[str] = None) -> Iterator[SourceFile]:
        """Yield files together with their content."""
        for relative_path in self.walk(suffix):
            content = self.read(relative_path)
            self.logger.debug(f"Read {relative_path} ({len(content)} bytes)")
            yield SourceFile(path=relative_path, content=content)
