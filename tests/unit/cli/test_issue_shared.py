"""Tests for the issue resolver, recency selection and draft building."""

import pytest

from ghi.cli.commands.issue.shared import (
    NoCandidatesError,
    build_title_body,
    issue_from_arg,
    select_issue_number,
)
from ghi.cli.parse_issue_reference import InvalidIssueReferenceError
from ghi.core.frecency.fake import FakeFrecencyStore
from ghi.core.github.fake import FakeGitHubIssues
from ghi.core.github.types import IssueNotFoundError
from ghi.core.prompt.fake import FakePrompter
from ghi.core.prompt.types import TitleBody, TitleBodyAction
from ghi.core.repo import GitHubRepo
from ghi.core.templates import IssueTemplate
from tests.test_utils import make_issue, sentinel_path

ACME = GitHubRepo(owner="acme", name="widgets")
OTHER = GitHubRepo(owner="other", name="repo")


def test_number_selector_fetches_from_base_repo() -> None:
    issues = FakeGitHubIssues(issues={42: make_issue(42)})

    issue, repo = issue_from_arg(issues, ACME, "42")

    assert issue.number == 42
    assert repo == ACME
    assert [(r, n) for r, n, _ in issues.fetched] == [(ACME, 42)]


def test_url_selector_overrides_base_repo() -> None:
    issues = FakeGitHubIssues(issues={42: make_issue(42)})

    _, repo = issue_from_arg(issues, OTHER, "https://github.com/acme/widgets/issues/42")

    assert repo == ACME
    assert [(r, n) for r, n, _ in issues.fetched] == [(ACME, 42)]


def test_invalid_selector_makes_no_fetch() -> None:
    issues = FakeGitHubIssues()

    with pytest.raises(InvalidIssueReferenceError, match='invalid issue format: "abc"'):
        issue_from_arg(issues, ACME, "abc")

    assert issues.fetched == []


def test_requested_fields_passed_through() -> None:
    issues = FakeGitHubIssues(issues={1: make_issue(1)})

    issue_from_arg(issues, ACME, "1", ("id", "number", "title", "state"))

    assert issues.fetched[0][2] == ("id", "number", "title", "state")


def test_not_found_propagates() -> None:
    issues = FakeGitHubIssues()

    with pytest.raises(IssueNotFoundError, match="#7"):
        issue_from_arg(issues, ACME, "7")


def test_select_issue_number_returns_decimal_string() -> None:
    frecency = FakeFrecencyStore(issues=[make_issue(3), make_issue(12)])
    prompter = FakePrompter(selected_number=12)

    assert select_issue_number(frecency, prompter, ACME, False) == "12"
    assert prompter.select_calls == [[3, 12]]


def test_select_issue_number_cancelled() -> None:
    frecency = FakeFrecencyStore(issues=[make_issue(3)])

    assert select_issue_number(frecency, FakePrompter(selected_number=None), ACME, False) is None


def test_select_issue_number_without_candidates() -> None:
    prompter = FakePrompter()

    with pytest.raises(NoCandidatesError):
        select_issue_number(FakeFrecencyStore(), prompter, ACME, False)

    assert prompter.select_calls == []


def test_select_issue_number_uses_kind() -> None:
    frecency = FakeFrecencyStore(issues=[make_issue(1)], pull_requests=[make_issue(2)])

    assert select_issue_number(frecency, FakePrompter(selected_number=2), ACME, True) == "2"


def test_build_title_body_from_flags_skips_prompt() -> None:
    prompter = FakePrompter(action=TitleBodyAction.CANCEL)

    draft = build_title_body(prompter, "Title", "Body", [])

    assert draft == TitleBody(title="Title", body="Body", action=TitleBodyAction.SUBMIT)
    assert prompter.collect_calls == []


def test_build_title_body_prompts_for_missing_body() -> None:
    template = IssueTemplate(path=sentinel_path() / "bug.md", name="Bug report", body="Steps")
    prompter = FakePrompter(body="From editor", action=TitleBodyAction.PREVIEW)

    draft = build_title_body(prompter, "Flag title", None, [template])

    assert draft == TitleBody(
        title="Flag title", body="From editor", action=TitleBodyAction.PREVIEW
    )
    assert prompter.collect_calls == [("Flag title", "", ["Bug report"])]


def test_build_title_body_prompts_for_everything() -> None:
    prompter = FakePrompter(title="Asked", body="Typed")

    draft = build_title_body(prompter, None, None, [])

    assert draft.title == "Asked"
    assert draft.body == "Typed"
    assert draft.action is TitleBodyAction.SUBMIT
