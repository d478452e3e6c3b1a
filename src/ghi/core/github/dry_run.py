"""Dry-run wrapper for GitHub issue operations."""

from collections.abc import Sequence

import click

from ghi.cli.output import user_output
from ghi.core.github.abc import DEFAULT_ISSUE_FIELDS, GitHubIssues
from ghi.core.github.types import CreateIssueResult, Issue, IssueStatus, RepoInfo
from ghi.core.repo import GitHubRepo

_DRY_RUN_PREFIX = click.style("[DRY RUN] ", fg="yellow", bold=True)


class DryRunGitHubIssues(GitHubIssues):
    """No-op wrapper for GitHub issue operations.

    Read operations are delegated to the wrapped implementation.
    Write operations print what they would do and return without executing.
    """

    def __init__(self, wrapped: GitHubIssues) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real GitHubIssues implementation to wrap
        """
        self._wrapped = wrapped

    def get_issue(
        self, repo: GitHubRepo, number: int, fields: Sequence[str] = DEFAULT_ISSUE_FIELDS
    ) -> Issue:
        return self._wrapped.get_issue(repo, number, fields)

    def create_issue(self, repo: GitHubRepo, title: str, body: str) -> CreateIssueResult:
        """Print intent and return a placeholder result so the workflow can finish."""
        user_output(_DRY_RUN_PREFIX + f"Would create issue in {repo.full_name}: {title}")
        return CreateIssueResult(number=0, url=repo.issue_url(0))

    def close_issue(self, repo: GitHubRepo, issue_id: str) -> None:
        user_output(_DRY_RUN_PREFIX + f"Would close issue {issue_id} in {repo.full_name}")

    def close_pull_request(self, repo: GitHubRepo, pr_id: str) -> None:
        user_output(_DRY_RUN_PREFIX + f"Would close pull request {pr_id} in {repo.full_name}")

    def get_repo_info(self, repo: GitHubRepo) -> RepoInfo:
        return self._wrapped.get_repo_info(repo)

    def list_issues(
        self,
        repo: GitHubRepo,
        *,
        state: str | None = None,
        labels: Sequence[str] = (),
        assignee: str | None = None,
        limit: int = 30,
    ) -> list[Issue]:
        return self._wrapped.list_issues(
            repo, state=state, labels=labels, assignee=assignee, limit=limit
        )

    def get_issue_status(self, repo: GitHubRepo, username: str) -> IssueStatus:
        return self._wrapped.get_issue_status(repo, username)

    def get_current_username(self, host: str) -> str | None:
        return self._wrapped.get_current_username(host)
