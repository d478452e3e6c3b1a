"""Command to view an issue."""

import click
from rich.console import Console
from rich.markdown import Markdown

from ghi.cli.commands.issue.shared import issue_from_arg
from ghi.cli.core import discover_base_repo
from ghi.cli.output import machine_output, user_output
from ghi.core.context import GhiContext
from ghi.core.display_utils import label_list, pluralize
from ghi.core.github.types import Issue

GHOST_LOGIN = "ghost"  # GitHub's placeholder for deleted accounts


def print_issue_preview(issue: Issue) -> None:
    """Print title, metadata line, rendered body and a link back to the issue."""
    labels = label_list(issue)
    meta = (
        f"opened by {issue.author or GHOST_LOGIN}. "
        f"{pluralize(issue.comment_count, 'comment')}. "
        + (f"({labels})" if labels else "")
    )

    machine_output(click.style(issue.title, bold=True))
    machine_output(click.style(meta.rstrip(), dim=True))
    machine_output()
    if issue.body:
        Console().print(Markdown(issue.body))
        machine_output()
    machine_output(click.style(f"View this issue on GitHub: {issue.url}", dim=True))


@click.command("view")
@click.argument("selector", type=str)
@click.option("-p", "--preview", is_flag=True, help="Display preview of issue content.")
@click.pass_obj
def view_issue(ctx: GhiContext, selector: str, preview: bool) -> None:
    """View an issue in the browser.

    SELECTOR is an issue number or a GitHub issue URL. With --preview the issue
    is printed to the terminal instead.
    """
    base_repo = discover_base_repo(ctx)

    try:
        issue, repo = issue_from_arg(ctx.issues, base_repo, selector)
        ctx.frecency.record_access(repo, issue)

        if preview:
            print_issue_preview(issue)
            return

        user_output(f"Opening {issue.url} in your browser.")
        ctx.browser.open(issue.url)
    except (RuntimeError, ValueError) as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
