"""Exception hierarchy for a godepgraph run.

Every error is terminal: the CLI logs the message and exits with the
error's ``exit_code``. Nothing is retried or downgraded to a warning.
"""

from typing import Optional


class GoDepGraphError(Exception):
    """Base class for all godepgraph failures."""

    exit_code = 1


class PreconditionError(GoDepGraphError):
    """Missing layout tool, invalid argument or missing credential file."""

    exit_code = 2


class FetchError(GoDepGraphError):
    """The remote repository could not be cloned."""

    exit_code = 3


class ConfigParseError(GoDepGraphError):
    """The module declaration file is missing or malformed."""

    exit_code = 4


class SourceSyntaxError(GoDepGraphError):
    """A source file's import section could not be parsed."""

    exit_code = 5

    def __init__(self, message: str, path: str = "", line: Optional[int] = None):
        self.path = path
        self.line = line
        location = path
        if path and line is not None:
            location = f"{path}:{line}"
        super().__init__(f"{location}: {message}" if location else message)


class WalkError(GoDepGraphError):
    """Traversal of the source tree failed."""

    exit_code = 6


class RenderError(GoDepGraphError):
    """The external layout engine failed."""

    exit_code = 7
