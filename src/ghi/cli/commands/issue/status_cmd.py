"""Command to show issues relevant to the current user."""

from datetime import datetime

import click

from ghi.cli.commands.issue.shared import print_header, print_issues
from ghi.cli.core import discover_base_repo
from ghi.cli.ensure import Ensure
from ghi.cli.output import user_output
from ghi.core.context import GhiContext
from ghi.core.github.types import IssueGroup


def _print_section(title: str, group: IssueGroup, empty_message: str, now: datetime) -> None:
    print_header(title)
    if group.issues:
        print_issues("  ", group.total_count, group.issues, now)
    else:
        user_output(f"  {empty_message}")
    user_output()


@click.command("status")
@click.pass_obj
def issue_status(ctx: GhiContext) -> None:
    """Show status of relevant issues."""
    repo = discover_base_repo(ctx)

    try:
        username = Ensure.not_none(
            ctx.issues.get_current_username(repo.host),
            f"not logged in to {repo.host}; run 'gh auth login'",
        )
        status = ctx.issues.get_issue_status(repo, username)
    except RuntimeError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    now = ctx.time.now()

    user_output()
    user_output(f"Relevant issues in {repo.full_name}")
    user_output()

    _print_section(
        "Issues assigned to you",
        status.assigned,
        "There are no issues assigned to you",
        now,
    )
    _print_section(
        "Issues mentioning you",
        status.mentioned,
        "There are no issues mentioning you",
        now,
    )
    _print_section(
        "Issues opened by you",
        status.authored,
        "There are no issues opened by you",
        now,
    )
