"""In-memory fake implementation of GitHub issues for testing."""

from collections.abc import Sequence
from dataclasses import replace

from ghi.core.github.abc import DEFAULT_ISSUE_FIELDS, GitHubIssues
from ghi.core.github.types import (
    CreateIssueResult,
    Issue,
    IssueGroup,
    IssueNotFoundError,
    IssueStatus,
    RepoInfo,
)
from ghi.core.repo import GitHubRepo

_EMPTY_STATUS = IssueStatus(
    assigned=IssueGroup(total_count=0, issues=[]),
    mentioned=IssueGroup(total_count=0, issues=[]),
    authored=IssueGroup(total_count=0, issues=[]),
)


class FakeGitHubIssues(GitHubIssues):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    Issues are looked up by number regardless of the repository asked for;
    the repository is recorded in `fetched` for assertions.
    """

    def __init__(
        self,
        *,
        issues: dict[int, Issue] | None = None,
        next_issue_number: int = 1,
        has_issues_enabled: bool = True,
        status: IssueStatus | None = None,
        username: str | None = "testuser",
        create_error: str | None = None,
        close_error: str | None = None,
    ) -> None:
        """Create FakeGitHubIssues with pre-configured state.

        Args:
            issues: Mapping of issue number -> Issue
            next_issue_number: Next issue number to assign (for predictable testing)
            has_issues_enabled: Value reported by get_repo_info
            status: Payload returned by get_issue_status
            username: GitHub username to return (None means not authenticated)
            create_error: If set, create_issue raises RuntimeError with this message
            close_error: If set, close mutations raise RuntimeError with this message
        """
        self._issues = dict(issues or {})
        self._next_issue_number = next_issue_number
        self._has_issues_enabled = has_issues_enabled
        self._status = status or _EMPTY_STATUS
        self._username = username
        self._create_error = create_error
        self._close_error = close_error
        self._fetched: list[tuple[GitHubRepo, int, tuple[str, ...]]] = []
        self._created_issues: list[tuple[GitHubRepo, str, str]] = []
        self._closed_issues: list[str] = []
        self._closed_pull_requests: list[str] = []
        self._list_calls: list[dict[str, object]] = []

    @property
    def fetched(self) -> list[tuple[GitHubRepo, int, tuple[str, ...]]]:
        """Read-only access to get_issue calls as (repo, number, fields) tuples."""
        return self._fetched

    @property
    def created_issues(self) -> list[tuple[GitHubRepo, str, str]]:
        """Read-only access to created issues as (repo, title, body) tuples."""
        return self._created_issues

    @property
    def closed_issues(self) -> list[str]:
        """Read-only access to node IDs passed to close_issue."""
        return self._closed_issues

    @property
    def closed_pull_requests(self) -> list[str]:
        """Read-only access to node IDs passed to close_pull_request."""
        return self._closed_pull_requests

    @property
    def list_calls(self) -> list[dict[str, object]]:
        """Read-only access to list_issues filter arguments."""
        return self._list_calls

    def get_issue(
        self, repo: GitHubRepo, number: int, fields: Sequence[str] = DEFAULT_ISSUE_FIELDS
    ) -> Issue:
        """Get issue from fake storage.

        Raises:
            IssueNotFoundError: If issue number not found
        """
        self._fetched.append((repo, number, tuple(fields)))
        if number not in self._issues:
            msg = f"Issue #{number} not found in {repo.full_name}"
            raise IssueNotFoundError(msg)
        return self._issues[number]

    def create_issue(self, repo: GitHubRepo, title: str, body: str) -> CreateIssueResult:
        if self._create_error is not None:
            raise RuntimeError(self._create_error)

        issue_number = self._next_issue_number
        self._next_issue_number += 1
        url = repo.issue_url(issue_number)

        self._issues[issue_number] = Issue(
            id=f"I_{issue_number}",
            number=issue_number,
            title=title,
            state="OPEN",
            body=body,
            url=url,
        )
        self._created_issues.append((repo, title, body))
        return CreateIssueResult(number=issue_number, url=url)

    def close_issue(self, repo: GitHubRepo, issue_id: str) -> None:
        if self._close_error is not None:
            raise RuntimeError(self._close_error)
        self._mark_closed(issue_id)
        self._closed_issues.append(issue_id)

    def close_pull_request(self, repo: GitHubRepo, pr_id: str) -> None:
        if self._close_error is not None:
            raise RuntimeError(self._close_error)
        self._mark_closed(pr_id)
        self._closed_pull_requests.append(pr_id)

    def _mark_closed(self, node_id: str) -> None:
        for number, issue in self._issues.items():
            if issue.id == node_id:
                self._issues[number] = replace(issue, state="CLOSED")
                return

    def get_repo_info(self, repo: GitHubRepo) -> RepoInfo:
        return RepoInfo(has_issues_enabled=self._has_issues_enabled)

    def list_issues(
        self,
        repo: GitHubRepo,
        *,
        state: str | None = None,
        labels: Sequence[str] = (),
        assignee: str | None = None,
        limit: int = 30,
    ) -> list[Issue]:
        """Query issues from fake storage.

        Filters by state and labels (AND logic); assignee is recorded only.
        """
        self._list_calls.append(
            {"state": state, "labels": tuple(labels), "assignee": assignee, "limit": limit}
        )
        issues = sorted(self._issues.values(), key=lambda issue: issue.number, reverse=True)

        wanted_state = (state or "open").upper()
        if wanted_state != "ALL":
            issues = [issue for issue in issues if issue.state == wanted_state]

        if labels:
            label_set = set(labels)
            issues = [issue for issue in issues if label_set.issubset(issue.labels.names)]

        return issues[:limit]

    def get_issue_status(self, repo: GitHubRepo, username: str) -> IssueStatus:
        return self._status

    def get_current_username(self, host: str) -> str | None:
        return self._username
