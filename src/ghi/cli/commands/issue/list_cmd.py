"""Command to list issues with filtering."""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ghi.cli.core import discover_base_repo
from ghi.cli.output import machine_output, user_output
from ghi.core.context import GhiContext
from ghi.core.display_utils import label_list, replace_excessive_whitespace
from ghi.core.github.types import Issue


def _render_table(issues: list[Issue]) -> None:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("number", style="green", no_wrap=True, justify="right")
    table.add_column("title")
    table.add_column("labels", style="dim")

    for issue in issues:
        labels = label_list(issue)
        table.add_row(
            f"#{issue.number}",
            escape(replace_excessive_whitespace(issue.title)),
            escape(f"({labels})") if labels else "",
        )

    console = Console()
    console.print(table)


def _render_plain(issues: list[Issue]) -> None:
    for issue in issues:
        title = replace_excessive_whitespace(issue.title)
        machine_output(f"{issue.number}\t{title}\t{label_list(issue)}")


@click.command("list")
@click.option("-a", "--assignee", type=str, default=None, help="Filter by assignee.")
@click.option("-l", "--label", "labels", multiple=True, help="Filter by label (repeatable).")
@click.option(
    "-s",
    "--state",
    type=click.Choice(["open", "closed", "all"]),
    default="open",
    help="Filter by state.",
)
@click.option(
    "-L",
    "--limit",
    type=click.IntRange(min=1),
    default=30,
    help="Maximum number of issues to fetch.",
)
@click.pass_obj
def list_issues(
    ctx: GhiContext,
    assignee: str | None,
    labels: tuple[str, ...],
    state: str,
    limit: int,
) -> None:
    """List and filter issues in this repository."""
    repo = discover_base_repo(ctx)

    user_output()
    user_output(f"Issues for {repo.full_name}")
    user_output()

    try:
        issues = ctx.issues.list_issues(
            repo, state=state, labels=labels, assignee=assignee, limit=limit
        )
    except (RuntimeError, ValueError) as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    if not issues:
        has_filters = bool(labels) or assignee is not None or state != "open"
        if has_filters:
            user_output("No issues match your search")
        else:
            user_output("There are no open issues")
        return

    if sys.stdout.isatty():
        _render_table(issues)
    else:
        _render_plain(issues)
