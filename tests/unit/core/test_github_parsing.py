"""Tests for GraphQL query building and response parsing."""

from datetime import UTC, datetime

import pytest

from ghi.core.github.parsing import (
    build_field_selection,
    build_issue_by_number_query,
    build_issue_list_query,
    build_issue_status_query,
    parse_issue_node,
    parse_issue_status,
)
from ghi.core.github.types import IssueKind


def test_field_selection_always_has_identity_fields() -> None:
    assert build_field_selection(()) == "id number title state"


def test_field_selection_expands_nested_fields() -> None:
    selection = build_field_selection(("author", "labels"))

    assert "author { login }" in selection
    assert "labels(first: 20) { totalCount nodes { name } }" in selection


def test_field_selection_deduplicates() -> None:
    assert build_field_selection(("id", "number")) == "id number title state"


def test_field_selection_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unsupported issue field: milestone"):
        build_field_selection(("milestone",))


def test_issue_by_number_query_covers_both_kinds() -> None:
    query = build_issue_by_number_query("acme", "widgets", 42, ("id",))

    assert 'repository(owner: "acme", name: "widgets")' in query
    assert "issueOrPullRequest(number: 42)" in query
    assert "__typename" in query
    assert "... on Issue {" in query
    assert "... on PullRequest {" in query


def test_issue_list_query_filters() -> None:
    query = build_issue_list_query(
        "acme",
        "widgets",
        states=["OPEN", "CLOSED"],
        labels=["bug"],
        assignee="octocat",
        page_size=30,
        after="cursor1",
    )

    assert "states: [OPEN, CLOSED]" in query
    assert 'labels: ["bug"]' in query
    assert 'filterBy: {assignee: "octocat"}' in query
    assert 'after: "cursor1"' in query
    assert "pageInfo { hasNextPage endCursor }" in query


def test_issue_list_query_without_optional_filters() -> None:
    query = build_issue_list_query(
        "acme", "widgets", states=["OPEN"], labels=[], assignee=None, page_size=10, after=None
    )

    assert "labels:" not in query
    assert "filterBy" not in query
    assert "after:" not in query


def test_issue_status_query_sections() -> None:
    query = build_issue_status_query("acme", "widgets", "octocat")

    assert 'assigned: issues(filterBy: {assignee: "octocat", states: OPEN}' in query
    assert 'mentioned: issues(filterBy: {mentioned: "octocat", states: OPEN}' in query
    assert 'authored: issues(filterBy: {createdBy: "octocat", states: OPEN}' in query


def test_parse_full_issue_node() -> None:
    node = {
        "__typename": "Issue",
        "id": "I_abc",
        "number": 42,
        "title": "Broken",
        "state": "OPEN",
        "body": "details",
        "url": "https://github.com/acme/widgets/issues/42",
        "author": {"login": "octocat"},
        "labels": {"totalCount": 3, "nodes": [{"name": "bug"}]},
        "comments": {"totalCount": 2},
        "updatedAt": "2024-01-10T08:30:00Z",
    }

    issue = parse_issue_node(node)

    assert issue.id == "I_abc"
    assert issue.kind is IssueKind.ISSUE
    assert issue.author == "octocat"
    assert issue.labels.names == ("bug",)
    assert issue.labels.is_truncated
    assert issue.comment_count == 2
    assert issue.updated_at == datetime(2024, 1, 10, 8, 30, tzinfo=UTC)


def test_parse_minimal_node_keeps_defaults() -> None:
    issue = parse_issue_node({"id": "I_1", "number": 1, "title": "t", "state": "CLOSED"})

    assert issue.state == "CLOSED"
    assert issue.body == ""
    assert issue.author is None
    assert issue.updated_at is None
    assert not issue.labels.is_truncated


def test_parse_merged_pull_request() -> None:
    issue = parse_issue_node(
        {"__typename": "PullRequest", "id": "PR_1", "number": 5, "title": "t", "state": "MERGED"}
    )

    assert issue.is_pull_request
    assert issue.state == "CLOSED"


def test_parse_issue_status() -> None:
    empty = {"totalCount": 0, "nodes": []}
    repository = {
        "assigned": {
            "totalCount": 5,
            "nodes": [{"id": "I_1", "number": 1, "title": "t", "state": "OPEN"}],
        },
        "mentioned": empty,
        "authored": empty,
    }

    status = parse_issue_status(repository)

    assert status.assigned.total_count == 5
    assert [issue.number for issue in status.assigned.issues] == [1]
    assert status.mentioned.issues == []
