import shlex
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

import git
import git.exc

from ..config import settings
from ..errors import FetchError, PreconditionError
from ..types import RepositoryLocation
from .tree import SourceTree
from ..utils.logger import app_logger

HTTPS_PREFIX = "https://"

logger = app_logger.bind(component="remote")


def parse_repository_url(location: str, ssh_user: Optional[str] = None) -> RepositoryLocation:
    """Convert an https repository link into its ssh clone address.

    ``https://github.com/owner/repo`` becomes ``git@github.com:owner/repo``.
    Anything not starting with ``https://`` is rejected.
    """
    if ssh_user is None:
        ssh_user = settings.ssh_user

    if not location or not location.startswith(HTTPS_PREFIX):
        raise PreconditionError(
            f"Please provide a valid https:// link to the repository, got {location!r}"
        )

    remainder = location[len(HTTPS_PREFIX):]
    host, _, owner_path = remainder.partition("/")
    owner_path = owner_path.strip("/")
    if not host or not owner_path:
        raise PreconditionError(f"Repository link is missing a host or path: {location!r}")

    return RepositoryLocation(
        https_url=location,
        ssh_url=f"{ssh_user}@{host}:{owner_path}",
        host=host,
        owner_path=owner_path,
    )


def load_ssh_key(key_path: Optional[Path] = None) -> Path:
    """Check that the private key exists and can be read."""
    if key_path is None:
        key_path = settings.ssh_key_path
    key_path = Path(key_path).expanduser()

    try:
        with open(key_path, "rb") as f:
            material = f.read()
    except OSError as e:
        raise PreconditionError(f"Cannot read ssh private key {key_path}: {e}") from e

    if not material.strip():
        raise PreconditionError(f"ssh private key {key_path} is empty")
    if not material.lstrip().startswith(b"-----BEGIN ") or b"PRIVATE KEY-----" not in material:
        raise PreconditionError(f"ssh private key {key_path} is not a PEM or OpenSSH private key")

    return key_path


def _is_missing_branch(error: git.exc.GitCommandError) -> bool:
    stderr = str(error.stderr or "")
    return "not found in upstream" in stderr or "Could not find remote branch" in stderr


class RepositoryFetcher:
    """Shallow-clones a repository into a temporary directory."""

    def __init__(self, key_path: Path, branches: Optional[List[str]] = None,
                 depth: Optional[int] = None):
        self.key_path = Path(key_path)
        self.branches = list(branches) if branches else list(settings.branches)
        self.depth = depth if depth is not None else settings.clone_depth
        self.workdir: Optional[Path] = None
        self.branch: Optional[str] = None
        self.logger = app_logger.bind(component="fetcher")

    def __enter__(self):
        self.workdir = Path(tempfile.mkdtemp(prefix="godepgraph-"))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        if self.workdir is not None:
            shutil.rmtree(self.workdir, ignore_errors=True)
            self.workdir = None

    def _ssh_env(self) -> dict:
        command = f"ssh -i {shlex.quote(str(self.key_path))} -o IdentitiesOnly=yes"
        return {"GIT_SSH_COMMAND": command}

    def fetch(self, location: RepositoryLocation) -> SourceTree:
        """Clone the first branch of the fallback list that the remote has."""
        if self.workdir is None:
            raise FetchError("RepositoryFetcher must be used as a context manager")

        attempted = []
        for index, branch in enumerate(self.branches):
            target = self.workdir / f"checkout-{index}"
            self.logger.info(f"Cloning {location.ssh_url} (branch {branch}, depth {self.depth})")
            try:
                git.Repo.clone_from(
                    location.ssh_url,
                    str(target),
                    env=self._ssh_env(),
                    branch=branch,
                    depth=self.depth,
                    single_branch=True,
                )
            except git.exc.GitCommandError as e:
                if _is_missing_branch(e):
                    self.logger.warning(f"Branch {branch} not found on {location.ssh_url}")
                    attempted.append(branch)
                    shutil.rmtree(target, ignore_errors=True)
                    continue
                raise FetchError(f"Error cloning repository {location.ssh_url}: {e}") from e

            self.branch = branch
            self.logger.info(f"Cloned {location.ssh_url} at branch {branch}")
            return SourceTree(str(target))

        raise FetchError(
            f"None of the branches {', '.join(attempted)} exist on {location.ssh_url}"
        )
