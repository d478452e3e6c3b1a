"""Fake git operations for testing."""

from pathlib import Path

from ghi.core.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    State is provided via constructor only.
    """

    def __init__(
        self,
        *,
        repository_root: Path | None = None,
        remote_urls: dict[str, str] | None = None,
    ) -> None:
        """Create FakeGit.

        Args:
            repository_root: Root returned for any cwd (None means not in a repository)
            remote_urls: Mapping of remote name -> URL
        """
        self._repository_root = repository_root
        self._remote_urls = remote_urls or {}

    def get_repository_root(self, cwd: Path) -> Path | None:
        return self._repository_root

    def get_remote_url(self, repo_root: Path, remote: str) -> str | None:
        return self._remote_urls.get(remote)
