"""Abstract interface for GitHub issue operations."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ghi.core.github.types import CreateIssueResult, Issue, IssueStatus, RepoInfo
from ghi.core.repo import GitHubRepo

# Fields fetched when a caller does not restrict the selection
DEFAULT_ISSUE_FIELDS = (
    "id",
    "number",
    "title",
    "state",
    "body",
    "url",
    "author",
    "labels",
    "comments",
    "updatedAt",
)


class GitHubIssues(ABC):
    """Abstract interface for GitHub issue operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_issue(
        self, repo: GitHubRepo, number: int, fields: Sequence[str] = DEFAULT_ISSUE_FIELDS
    ) -> Issue:
        """Fetch an issue or pull request by number.

        Args:
            repo: Repository to look in
            number: Issue or pull request number
            fields: Field names to fetch; attributes outside the set keep defaults

        Returns:
            Issue with kind set from the record type

        Raises:
            IssueNotFoundError: If the number does not exist in the repository
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def create_issue(self, repo: GitHubRepo, title: str, body: str) -> CreateIssueResult:
        """Create a new GitHub issue.

        Args:
            repo: Repository to create the issue in
            title: Issue title
            body: Issue body markdown

        Returns:
            CreateIssueResult with issue number and full GitHub URL

        Raises:
            RuntimeError: If gh CLI fails (not installed, not authenticated, or command error)
        """
        ...

    @abstractmethod
    def close_issue(self, repo: GitHubRepo, issue_id: str) -> None:
        """Close an issue through the closeIssue mutation.

        Args:
            repo: Repository the issue belongs to (selects the API host)
            issue_id: Opaque node ID of the issue

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def close_pull_request(self, repo: GitHubRepo, pr_id: str) -> None:
        """Close a pull request through the closePullRequest mutation.

        Args:
            repo: Repository the pull request belongs to (selects the API host)
            pr_id: Opaque node ID of the pull request

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def get_repo_info(self, repo: GitHubRepo) -> RepoInfo:
        """Fetch repository metadata.

        Raises:
            RuntimeError: If gh CLI fails or the repository does not exist
        """
        ...

    @abstractmethod
    def list_issues(
        self,
        repo: GitHubRepo,
        *,
        state: str | None = None,
        labels: Sequence[str] = (),
        assignee: str | None = None,
        limit: int = 30,
    ) -> list[Issue]:
        """Query issues by criteria.

        Args:
            repo: Repository to query
            state: "open", "closed" or "all" (None means open)
            labels: Filter by labels (all labels must match)
            assignee: Filter by assignee login
            limit: Maximum number of issues to return

        Returns:
            Issues ordered by creation, newest first

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def get_issue_status(self, repo: GitHubRepo, username: str) -> IssueStatus:
        """Fetch open issues assigned to, mentioning, and authored by a user.

        Raises:
            RuntimeError: If gh CLI fails
        """
        ...

    @abstractmethod
    def get_current_username(self, host: str) -> str | None:
        """Get the authenticated GitHub username.

        Returns:
            GitHub username if authenticated, None if not authenticated
        """
        ...
