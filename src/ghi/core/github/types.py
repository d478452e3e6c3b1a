"""Data types for GitHub issues integration."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Literal

IssueState = Literal["OPEN", "CLOSED"]


class IssueKind(Enum):
    """Whether a record is a plain issue or a pull request.

    Pull requests share the issue number space but need their own close mutation.
    """

    ISSUE = "issue"
    PULL_REQUEST = "pull_request"


@dataclass(frozen=True)
class LabelList:
    """Labels returned for an issue.

    total_count may exceed len(names) when the API returned a partial list.
    """

    names: tuple[str, ...] = ()
    total_count: int = 0

    @property
    def is_truncated(self) -> bool:
        return self.total_count > len(self.names)


@dataclass(frozen=True)
class Issue:
    """Information about a GitHub issue or pull request.

    Only id, number, title and state are guaranteed; the other attributes keep
    their defaults when the caller fetched a restricted field set.
    """

    id: str
    number: int
    title: str
    state: IssueState
    body: str = ""
    url: str = ""
    labels: LabelList = field(default_factory=LabelList)
    author: str | None = None
    updated_at: datetime | None = None
    comment_count: int = 0
    kind: IssueKind = IssueKind.ISSUE

    @property
    def is_pull_request(self) -> bool:
        return self.kind is IssueKind.PULL_REQUEST


@dataclass(frozen=True)
class CreateIssueResult:
    """Result from creating a GitHub issue.

    Attributes:
        number: Issue number (e.g., 123)
        url: Full GitHub URL (e.g., https://github.com/owner/repo/issues/123)
    """

    number: int
    url: str


@dataclass(frozen=True)
class RepoInfo:
    """Repository metadata needed before creating issues."""

    has_issues_enabled: bool


@dataclass(frozen=True)
class IssueGroup:
    """A page of issues plus the total number matching the query."""

    total_count: int
    issues: list[Issue]


@dataclass(frozen=True)
class IssueStatus:
    """Issues relevant to the authenticated user in one repository."""

    assigned: IssueGroup
    mentioned: IssueGroup
    authored: IssueGroup


class IssueNotFoundError(RuntimeError):
    """Raised when no issue or pull request has the requested number."""
