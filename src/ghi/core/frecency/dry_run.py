"""Dry-run wrapper for the frecency store."""

from ghi.core.frecency.abc import FrecencyStore
from ghi.core.github.types import Issue
from ghi.core.repo import GitHubRepo


class DryRunFrecencyStore(FrecencyStore):
    """Reads pass through; writes are skipped silently."""

    def __init__(self, wrapped: FrecencyStore) -> None:
        self._wrapped = wrapped

    def get_frecent(self, repo: GitHubRepo, is_pr: bool) -> list[Issue]:
        return self._wrapped.get_frecent(repo, is_pr)

    def delete_by_number(self, repo: GitHubRepo, is_pr: bool, number: int) -> None:
        pass

    def record_access(self, repo: GitHubRepo, issue: Issue) -> None:
        pass
