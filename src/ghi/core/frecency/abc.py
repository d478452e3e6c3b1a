"""Abstract interface for the recently-used issue store."""

from abc import ABC, abstractmethod

from ghi.core.github.types import Issue
from ghi.core.repo import GitHubRepo


class FrecencyStore(ABC):
    """Ranks issues by how often and how recently the user touched them.

    Entries are scoped by repository and by kind (issue vs pull request).
    """

    @abstractmethod
    def get_frecent(self, repo: GitHubRepo, is_pr: bool) -> list[Issue]:
        """Return tracked issues, highest ranked first.

        Raises:
            RuntimeError: If the store cannot be read
        """
        ...

    @abstractmethod
    def delete_by_number(self, repo: GitHubRepo, is_pr: bool, number: int) -> None:
        """Forget the entry for an issue number. Missing entries are ignored.

        Raises:
            RuntimeError: If the store cannot be written
        """
        ...

    @abstractmethod
    def record_access(self, repo: GitHubRepo, issue: Issue) -> None:
        """Count a visit to an issue and refresh its last-access time.

        Raises:
            RuntimeError: If the store cannot be written
        """
        ...
