"""Production implementation of GitHub issues using gh CLI."""

import json
import logging
import subprocess
from collections.abc import Sequence
from typing import Any

from ghi.core.github.abc import DEFAULT_ISSUE_FIELDS, GitHubIssues
from ghi.core.github.parsing import (
    build_issue_by_number_query,
    build_issue_list_query,
    build_issue_status_query,
    parse_issue_node,
    parse_issue_status,
)
from ghi.core.github.types import (
    CreateIssueResult,
    Issue,
    IssueNotFoundError,
    IssueStatus,
    RepoInfo,
)
from ghi.core.repo import DEFAULT_HOST, GitHubRepo
from ghi.core.subprocess_utils import execute_gh_command

logger = logging.getLogger(__name__)

_NOT_FOUND_MARKER = "Could not resolve to an issue or pull request"
_MAX_PAGE_SIZE = 100

_CLOSE_ISSUE_MUTATION = (
    "mutation IssueClose($id: ID!) { closeIssue(input: {issueId: $id}) { issue { id } } }"
)
_CLOSE_PULL_REQUEST_MUTATION = (
    "mutation PullRequestClose($id: ID!) "
    "{ closePullRequest(input: {pullRequestId: $id}) { pullRequest { id } } }"
)


def _hostname_args(host: str) -> list[str]:
    if host == DEFAULT_HOST:
        return []
    return ["--hostname", host]


class RealGitHubIssues(GitHubIssues):
    """Production implementation using gh CLI.

    All GitHub issue operations execute actual gh commands via subprocess.
    """

    def _graphql(self, repo: GitHubRepo, query: str, **variables: str) -> dict[str, Any]:
        cmd = ["gh", "api", "graphql", *_hostname_args(repo.host), "-f", f"query={query}"]
        for key, value in variables.items():
            cmd.extend(["-f", f"{key}={value}"])
        stdout = execute_gh_command(cmd)
        return json.loads(stdout)["data"]

    def get_issue(
        self, repo: GitHubRepo, number: int, fields: Sequence[str] = DEFAULT_ISSUE_FIELDS
    ) -> Issue:
        """Fetch issue or pull request using a GraphQL issueOrPullRequest query.

        Note: gh exits non-zero when GraphQL reports the number as unresolvable;
        that case is translated to IssueNotFoundError.
        """
        query = build_issue_by_number_query(repo.owner, repo.name, number, fields)
        try:
            data = self._graphql(repo, query)
        except RuntimeError as e:
            if _NOT_FOUND_MARKER in str(e):
                msg = f"Issue #{number} not found in {repo.full_name}"
                raise IssueNotFoundError(msg) from e
            raise

        node = data["repository"]["issueOrPullRequest"]
        if node is None:
            msg = f"Issue #{number} not found in {repo.full_name}"
            raise IssueNotFoundError(msg)
        return parse_issue_node(node)

    def create_issue(self, repo: GitHubRepo, title: str, body: str) -> CreateIssueResult:
        """Create a new GitHub issue using the REST endpoint through gh api."""
        cmd = [
            "gh",
            "api",
            *_hostname_args(repo.host),
            "--method",
            "POST",
            f"repos/{repo.owner}/{repo.name}/issues",
            "-f",
            f"title={title}",
            "-f",
            f"body={body}",
        ]
        data = json.loads(execute_gh_command(cmd))
        logger.debug("Created issue #%s in %s", data["number"], repo.full_name)
        return CreateIssueResult(number=data["number"], url=data["html_url"])

    def close_issue(self, repo: GitHubRepo, issue_id: str) -> None:
        self._graphql(repo, _CLOSE_ISSUE_MUTATION, id=issue_id)

    def close_pull_request(self, repo: GitHubRepo, pr_id: str) -> None:
        self._graphql(repo, _CLOSE_PULL_REQUEST_MUTATION, id=pr_id)

    def get_repo_info(self, repo: GitHubRepo) -> RepoInfo:
        query = (
            "query RepositoryInfo($owner: String!, $name: String!) "
            "{ repository(owner: $owner, name: $name) { hasIssuesEnabled } }"
        )
        data = self._graphql(repo, query, owner=repo.owner, name=repo.name)
        return RepoInfo(has_issues_enabled=data["repository"]["hasIssuesEnabled"])

    def list_issues(
        self,
        repo: GitHubRepo,
        *,
        state: str | None = None,
        labels: Sequence[str] = (),
        assignee: str | None = None,
        limit: int = 30,
    ) -> list[Issue]:
        """Query issues page by page until limit is reached."""
        match (state or "open").lower():
            case "open":
                states = ["OPEN"]
            case "closed":
                states = ["CLOSED"]
            case "all":
                states = ["OPEN", "CLOSED"]
            case _:
                msg = f"invalid state: {state}"
                raise ValueError(msg)

        issues: list[Issue] = []
        cursor: str | None = None
        while len(issues) < limit:
            query = build_issue_list_query(
                repo.owner,
                repo.name,
                states=states,
                labels=labels,
                assignee=assignee,
                page_size=min(limit - len(issues), _MAX_PAGE_SIZE),
                after=cursor,
            )
            connection = self._graphql(repo, query)["repository"]["issues"]
            issues.extend(parse_issue_node(node) for node in connection["nodes"])

            page_info = connection["pageInfo"]
            if not page_info["hasNextPage"]:
                break
            cursor = page_info["endCursor"]

        return issues[:limit]

    def get_issue_status(self, repo: GitHubRepo, username: str) -> IssueStatus:
        query = build_issue_status_query(repo.owner, repo.name, username)
        return parse_issue_status(self._graphql(repo, query)["repository"])

    def get_current_username(self, host: str) -> str | None:
        """Get current GitHub username via gh api user.

        Returns:
            GitHub username if authenticated, None otherwise
        """
        try:
            result = subprocess.run(
                ["gh", "api", *_hostname_args(host), "user", "--jq", ".login"],
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise RuntimeError("Command not found: gh") from e
        if result.returncode != 0:
            logger.debug("gh api user failed: %s", result.stderr.strip())
            return None
        return result.stdout.strip() or None
