"""Helpers shared by the issue commands."""

from collections.abc import Sequence
from datetime import datetime

import click

from ghi.cli.output import user_output
from ghi.cli.parse_issue_reference import parse_issue_reference
from ghi.core.display_utils import (
    format_relative_time,
    label_list,
    replace_excessive_whitespace,
    truncate,
)
from ghi.core.frecency.abc import FrecencyStore
from ghi.core.github.abc import DEFAULT_ISSUE_FIELDS, GitHubIssues
from ghi.core.github.types import Issue
from ghi.core.prompt.abc import Prompter
from ghi.core.prompt.types import TitleBody, TitleBodyAction
from ghi.core.repo import GitHubRepo
from ghi.core.templates import IssueTemplate

STATUS_TITLE_WIDTH = 70


class NoCandidatesError(Exception):
    """Raised when there are no recent issues to offer for selection."""


def issue_from_arg(
    issues: GitHubIssues,
    base_repo: GitHubRepo,
    arg: str,
    fields: Sequence[str] = DEFAULT_ISSUE_FIELDS,
) -> tuple[Issue, GitHubRepo]:
    """Resolve a selector to an issue.

    A URL selector names its own repository, which replaces base_repo for the
    fetch. The repository actually queried is returned alongside the issue so
    that follow-up mutations target the same place.

    Raises:
        InvalidIssueReferenceError: If arg is neither a number nor an issue URL
        IssueNotFoundError: If the number does not exist in the repository
        RuntimeError: If the fetch fails
    """
    reference = parse_issue_reference(arg, base_repo.host)
    repo = reference.repo or base_repo
    return issues.get_issue(repo, reference.number, fields), repo


def select_issue_number(
    frecency: FrecencyStore, prompter: Prompter, repo: GitHubRepo, is_pr: bool
) -> str | None:
    """Let the user pick one of their recently used issues.

    Returns:
        The chosen issue number as a selector string, or None if the user cancelled

    Raises:
        NoCandidatesError: If nothing has been used recently in this repository
    """
    candidates = frecency.get_frecent(repo, is_pr)
    if not candidates:
        raise NoCandidatesError("no interactive candidates")

    selected = prompter.select_issue(candidates)
    if selected is None:
        return None
    return str(selected.number)


def build_title_body(
    prompter: Prompter,
    title: str | None,
    body: str | None,
    templates: list[IssueTemplate],
) -> TitleBody:
    """Combine flag values with whatever the prompt collects.

    Nothing is prompted when both title and body came from flags. Otherwise the
    prompt fills the gaps and decides the action; values given as flags are kept.
    """
    if title and body:
        return TitleBody(title=title, body=body, action=TitleBodyAction.SUBMIT)

    collected = prompter.collect_title_body(title or "", body or "", templates)
    return TitleBody(
        title=title or collected.title,
        body=body or collected.body,
        action=collected.action,
    )


def print_issues(prefix: str, total_count: int, issues: list[Issue], now: datetime) -> None:
    """Print status rows with labels and last update, then a remainder line."""
    for issue in issues:
        number = click.style(f"#{issue.number}", fg="green")
        title = truncate(STATUS_TITLE_WIDTH, replace_excessive_whitespace(issue.title))

        labels = label_list(issue)
        if labels:
            labels = click.style(f"  ({labels})", dim=True)

        ago = ""
        if issue.updated_at is not None:
            ago = click.style(format_relative_time(issue.updated_at, now), dim=True)

        user_output(f"{prefix}{number} {title}{labels} {ago}".rstrip())

    remaining = total_count - len(issues)
    if remaining > 0:
        user_output(click.style(f"{prefix}And {remaining} more", dim=True))


def print_header(message: str) -> None:
    user_output(click.style(message, bold=True))
