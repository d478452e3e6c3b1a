"""Factory for Issue test data."""

from datetime import UTC, datetime

from ghi.core.github.types import Issue, IssueKind, IssueState, LabelList


def make_issue(
    number: int,
    *,
    title: str | None = None,
    state: IssueState = "OPEN",
    body: str = "",
    labels: tuple[str, ...] = (),
    total_labels: int | None = None,
    author: str | None = "octocat",
    updated_at: datetime | None = None,
    comment_count: int = 0,
    kind: IssueKind = IssueKind.ISSUE,
    repo_path: str = "owner/repo",
) -> Issue:
    """Build an Issue with predictable defaults (id "I_<n>", url on github.com)."""
    path = "pull" if kind is IssueKind.PULL_REQUEST else "issues"
    return Issue(
        id=f"I_{number}" if kind is IssueKind.ISSUE else f"PR_{number}",
        number=number,
        title=title if title is not None else f"Issue {number}",
        state=state,
        body=body,
        url=f"https://github.com/{repo_path}/{path}/{number}",
        labels=LabelList(
            names=labels,
            total_count=total_labels if total_labels is not None else len(labels),
        ),
        author=author,
        updated_at=updated_at or datetime(2024, 1, 14, 12, 0, tzinfo=UTC),
        comment_count=comment_count,
        kind=kind,
    )
