"""In-memory fake frecency store for testing."""

from ghi.core.frecency.abc import FrecencyStore
from ghi.core.github.types import Issue
from ghi.core.repo import GitHubRepo


class FakeFrecencyStore(FrecencyStore):
    """In-memory fake implementation for testing.

    The same pre-ranked lists are returned for every repository.
    """

    def __init__(
        self,
        *,
        issues: list[Issue] | None = None,
        pull_requests: list[Issue] | None = None,
        read_error: str | None = None,
        delete_error: str | None = None,
    ) -> None:
        """Create FakeFrecencyStore.

        Args:
            issues: Issues returned by get_frecent(is_pr=False), in rank order
            pull_requests: Pull requests returned by get_frecent(is_pr=True)
            read_error: If set, get_frecent raises RuntimeError with this message
            delete_error: If set, delete_by_number raises RuntimeError with this message
        """
        self._issues = list(issues or [])
        self._pull_requests = list(pull_requests or [])
        self._read_error = read_error
        self._delete_error = delete_error
        self._deleted: list[tuple[GitHubRepo, bool, int]] = []
        self._recorded: list[tuple[GitHubRepo, int]] = []

    @property
    def deleted(self) -> list[tuple[GitHubRepo, bool, int]]:
        """Read-only access to delete_by_number calls as (repo, is_pr, number)."""
        return self._deleted

    @property
    def recorded(self) -> list[tuple[GitHubRepo, int]]:
        """Read-only access to record_access calls as (repo, number)."""
        return self._recorded

    def get_frecent(self, repo: GitHubRepo, is_pr: bool) -> list[Issue]:
        if self._read_error is not None:
            raise RuntimeError(self._read_error)
        return list(self._pull_requests if is_pr else self._issues)

    def delete_by_number(self, repo: GitHubRepo, is_pr: bool, number: int) -> None:
        if self._delete_error is not None:
            raise RuntimeError(self._delete_error)
        self._deleted.append((repo, is_pr, number))
        if is_pr:
            self._pull_requests = [pr for pr in self._pull_requests if pr.number != number]
        else:
            self._issues = [issue for issue in self._issues if issue.number != number]

    def record_access(self, repo: GitHubRepo, issue: Issue) -> None:
        self._recorded.append((repo, issue.number))
