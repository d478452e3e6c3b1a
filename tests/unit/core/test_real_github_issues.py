"""Tests for RealGitHubIssues command construction and response handling.

execute_gh_command is replaced so no gh process is started.
"""

import json

import pytest

from ghi.core.github import real
from ghi.core.github.real import RealGitHubIssues
from ghi.core.github.types import IssueKind, IssueNotFoundError
from ghi.core.repo import GitHubRepo

REPO = GitHubRepo(owner="acme", name="widgets")


class _RecordingGh:
    def __init__(self, responses: list[object]) -> None:
        self.responses = list(responses)
        self.commands: list[list[str]] = []

    def __call__(self, cmd: list[str], cwd=None) -> str:
        self.commands.append(cmd)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return json.dumps(response)


def _install(monkeypatch: pytest.MonkeyPatch, *responses: object) -> _RecordingGh:
    recorder = _RecordingGh(list(responses))
    monkeypatch.setattr(real, "execute_gh_command", recorder)
    return recorder


def _node(number: int, typename: str = "Issue", state: str = "OPEN") -> dict:
    return {
        "__typename": typename,
        "id": f"N_{number}",
        "number": number,
        "title": f"Title {number}",
        "state": state,
    }


def test_get_issue_pull_request(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _install(
        monkeypatch,
        {"data": {"repository": {"issueOrPullRequest": _node(5, "PullRequest", "MERGED")}}},
    )

    issue = RealGitHubIssues().get_issue(REPO, 5, ("id", "number", "title", "state"))

    assert issue.kind is IssueKind.PULL_REQUEST
    assert issue.state == "CLOSED"
    assert recorder.commands[0][:3] == ["gh", "api", "graphql"]
    assert "--hostname" not in recorder.commands[0]


def test_get_issue_not_found_from_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(
        monkeypatch,
        RuntimeError(
            "GraphQL: Could not resolve to an issue or pull request with the number of 9."
        ),
    )

    with pytest.raises(IssueNotFoundError, match="Issue #9 not found in acme/widgets"):
        RealGitHubIssues().get_issue(REPO, 9)


def test_get_issue_other_errors_propagate(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(monkeypatch, RuntimeError("HTTP 401: Bad credentials"))

    with pytest.raises(RuntimeError, match="Bad credentials"):
        RealGitHubIssues().get_issue(REPO, 9)


def test_enterprise_host_passes_hostname(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _install(monkeypatch, {"data": {"repository": {"hasIssuesEnabled": False}}})
    repo = GitHubRepo(owner="acme", name="widgets", host="ghe.example.com")

    info = RealGitHubIssues().get_repo_info(repo)

    assert info.has_issues_enabled is False
    assert recorder.commands[0][3:5] == ["--hostname", "ghe.example.com"]


def test_create_issue_posts_to_rest_endpoint(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _install(
        monkeypatch, {"number": 12, "html_url": "https://github.com/acme/widgets/issues/12"}
    )

    result = RealGitHubIssues().create_issue(REPO, "Title", "Body")

    assert result.number == 12
    assert result.url == "https://github.com/acme/widgets/issues/12"
    cmd = recorder.commands[0]
    assert "repos/acme/widgets/issues" in cmd
    assert "title=Title" in cmd
    assert "body=Body" in cmd


def test_close_mutations_differ(monkeypatch: pytest.MonkeyPatch) -> None:
    recorder = _install(monkeypatch, {"data": {}}, {"data": {}})
    gateway = RealGitHubIssues()

    gateway.close_issue(REPO, "I_1")
    gateway.close_pull_request(REPO, "PR_2")

    issue_cmd, pr_cmd = recorder.commands
    assert any("closeIssue" in arg for arg in issue_cmd)
    assert "id=I_1" in issue_cmd
    assert any("closePullRequest" in arg for arg in pr_cmd)
    assert "id=PR_2" in pr_cmd


def test_list_issues_paginates(monkeypatch: pytest.MonkeyPatch) -> None:
    first_page = {
        "pageInfo": {"hasNextPage": True, "endCursor": "c1"},
        "nodes": [_node(3), _node(2)],
    }
    second_page = {"pageInfo": {"hasNextPage": False, "endCursor": None}, "nodes": [_node(1)]}
    recorder = _install(
        monkeypatch,
        {"data": {"repository": {"issues": first_page}}},
        {"data": {"repository": {"issues": second_page}}},
    )

    issues = RealGitHubIssues().list_issues(REPO, limit=3)

    assert [issue.number for issue in issues] == [3, 2, 1]
    assert any('after: "c1"' in arg for arg in recorder.commands[1])


def test_list_issues_rejects_unknown_state() -> None:
    with pytest.raises(ValueError, match="invalid state: merged"):
        RealGitHubIssues().list_issues(REPO, state="merged")
