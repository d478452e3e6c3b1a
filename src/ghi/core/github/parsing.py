"""GraphQL query construction and response parsing for issue operations."""

import json
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from ghi.core.github.types import Issue, IssueGroup, IssueKind, IssueStatus, LabelList

# GraphQL selection for each supported field name
FIELD_SELECTIONS = {
    "id": "id",
    "number": "number",
    "title": "title",
    "state": "state",
    "body": "body",
    "url": "url",
    "author": "author { login }",
    "labels": "labels(first: 20) { totalCount nodes { name } }",
    "comments": "comments { totalCount }",
    "updatedAt": "updatedAt",
}

STATUS_PAGE_SIZE = 3


def build_field_selection(fields: Sequence[str]) -> str:
    """Translate field names into a GraphQL selection set body.

    id, number, title and state are always selected.

    Raises:
        ValueError: If a field name is not supported
    """
    selected: list[str] = []
    for name in ("id", "number", "title", "state", *fields):
        if name not in FIELD_SELECTIONS:
            msg = f"Unsupported issue field: {name}"
            raise ValueError(msg)
        selection = FIELD_SELECTIONS[name]
        if selection not in selected:
            selected.append(selection)
    return " ".join(selected)


def build_issue_by_number_query(owner: str, name: str, number: int, fields: Sequence[str]) -> str:
    selection = build_field_selection(fields)
    return (
        f"query IssueByNumber {{ "
        f"repository(owner: {json.dumps(owner)}, name: {json.dumps(name)}) {{ "
        f"issueOrPullRequest(number: {number}) {{ __typename "
        f"... on Issue {{ {selection} }} "
        f"... on PullRequest {{ {selection} }} "
        f"}} }} }}"
    )


def build_issue_list_query(
    owner: str,
    name: str,
    *,
    states: Sequence[str],
    labels: Sequence[str],
    assignee: str | None,
    page_size: int,
    after: str | None,
) -> str:
    arguments = [
        f"first: {page_size}",
        "orderBy: {field: CREATED_AT, direction: DESC}",
        f"states: [{', '.join(states)}]",
    ]
    if labels:
        arguments.append(f"labels: {json.dumps(list(labels))}")
    if assignee:
        arguments.append(f"filterBy: {{assignee: {json.dumps(assignee)}}}")
    if after:
        arguments.append(f"after: {json.dumps(after)}")

    selection = build_field_selection(("url", "labels", "updatedAt"))
    return (
        f"query IssueList {{ repository(owner: {json.dumps(owner)}, name: {json.dumps(name)}) {{ "
        f"issues({', '.join(arguments)}) {{ "
        f"pageInfo {{ hasNextPage endCursor }} nodes {{ {selection} }} "
        f"}} }} }}"
    )


def build_issue_status_query(owner: str, name: str, username: str) -> str:
    selection = build_field_selection(("url", "labels", "updatedAt"))
    login = json.dumps(username)
    order = "orderBy: {field: UPDATED_AT, direction: DESC}"
    sections = []
    for alias, filter_key in (
        ("assigned", "assignee"),
        ("mentioned", "mentioned"),
        ("authored", "createdBy"),
    ):
        sections.append(
            f"{alias}: issues(filterBy: {{{filter_key}: {login}, states: OPEN}}, "
            f"first: {STATUS_PAGE_SIZE}, {order}) {{ totalCount nodes {{ {selection} }} }}"
        )
    return (
        f"query IssueStatus {{ "
        f"repository(owner: {json.dumps(owner)}, name: {json.dumps(name)}) {{ "
        f"{' '.join(sections)} }} }}"
    )


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def parse_issue_node(node: dict[str, Any]) -> Issue:
    """Convert a GraphQL Issue or PullRequest node to an Issue.

    MERGED pull requests are reported as CLOSED.
    """
    kind = IssueKind.PULL_REQUEST if node.get("__typename") == "PullRequest" else IssueKind.ISSUE
    state = "CLOSED" if node["state"] in ("CLOSED", "MERGED") else "OPEN"

    labels_data = node.get("labels") or {}
    label_names = tuple(label["name"] for label in labels_data.get("nodes", []))
    author = node.get("author") or {}
    comments = node.get("comments") or {}

    return Issue(
        id=node["id"],
        number=node["number"],
        title=node["title"],
        state=state,
        body=node.get("body") or "",
        url=node.get("url") or "",
        labels=LabelList(
            names=label_names,
            total_count=labels_data.get("totalCount", len(label_names)),
        ),
        author=author.get("login"),
        updated_at=_parse_timestamp(node.get("updatedAt")),
        comment_count=comments.get("totalCount", 0),
        kind=kind,
    )


def parse_issue_group(data: dict[str, Any]) -> IssueGroup:
    return IssueGroup(
        total_count=data["totalCount"],
        issues=[parse_issue_node(node) for node in data["nodes"]],
    )


def parse_issue_status(repository: dict[str, Any]) -> IssueStatus:
    return IssueStatus(
        assigned=parse_issue_group(repository["assigned"]),
        mentioned=parse_issue_group(repository["mentioned"]),
        authored=parse_issue_group(repository["authored"]),
    )
