"""Abstract interface for the git queries ghi needs."""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Return the top-level directory of the working tree containing cwd.

        Returns:
            Repository root, or None if cwd is not inside a git repository
        """
        ...

    @abstractmethod
    def get_remote_url(self, repo_root: Path, remote: str) -> str | None:
        """Return the fetch URL configured for a remote.

        Returns:
            Remote URL, or None if the remote does not exist
        """
        ...
