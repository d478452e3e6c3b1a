"""Tests for parse_issue_reference."""

import pytest

from ghi.cli.parse_issue_reference import (
    InvalidIssueReferenceError,
    IssueReference,
    parse_issue_reference,
)
from ghi.core.repo import GitHubRepo


def test_plain_number() -> None:
    assert parse_issue_reference("42", "github.com") == IssueReference(number=42, repo=None)


def test_leading_zeros_allowed() -> None:
    assert parse_issue_reference("007", "github.com").number == 7


def test_zero_is_a_number() -> None:
    assert parse_issue_reference("0", "github.com").number == 0


def test_issue_url_carries_repository() -> None:
    ref = parse_issue_reference("https://github.com/acme/widgets/issues/42", "github.com")

    assert ref.number == 42
    assert ref.repo == GitHubRepo(owner="acme", name="widgets", host="github.com")


def test_pull_request_url() -> None:
    ref = parse_issue_reference("https://github.com/acme/widgets/pull/9", "github.com")

    assert ref.number == 9
    assert ref.repo is not None
    assert ref.repo.full_name == "acme/widgets"


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/acme/widgets/issues/42#issuecomment-1",
        "https://github.com/acme/widgets/issues/42/",
        "https://github.com/acme/widgets/issues/42?foo=bar",
    ],
)
def test_url_suffixes_ignored(url: str) -> None:
    assert parse_issue_reference(url, "github.com").number == 42


def test_enterprise_host() -> None:
    ref = parse_issue_reference("https://ghe.example.com/acme/widgets/issues/5", "ghe.example.com")

    assert ref.repo == GitHubRepo(owner="acme", name="widgets", host="ghe.example.com")


def test_url_host_case_insensitive() -> None:
    ref = parse_issue_reference("https://GitHub.com/acme/widgets/issues/42", "github.com")

    assert ref.number == 42
    assert ref.repo == GitHubRepo(owner="acme", name="widgets", host="github.com")


def test_url_for_other_host_rejected() -> None:
    with pytest.raises(InvalidIssueReferenceError, match="invalid issue format"):
        parse_issue_reference("https://gitlab.com/acme/widgets/issues/5", "github.com")


@pytest.mark.parametrize(
    "reference",
    [
        "abc",
        "-1",
        "+1",
        "1.5",
        " 42",
        "42 ",
        "",
        "http://github.com/acme/widgets/issues/1",
        "https://github.com/acme/widgets/issues/42abc",
        "https://github.com/acme/widgets/issues/42/comments",
    ],
)
def test_invalid_references(reference: str) -> None:
    with pytest.raises(InvalidIssueReferenceError) as exc_info:
        parse_issue_reference(reference, "github.com")

    assert str(exc_info.value) == f'invalid issue format: "{reference}"'


def test_invalid_reference_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_issue_reference("abc", "github.com")


def test_non_ascii_digits_rejected() -> None:
    with pytest.raises(InvalidIssueReferenceError):
        parse_issue_reference("٤٢", "github.com")
