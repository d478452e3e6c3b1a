"""Issue command group."""

import dataclasses

import click

from ghi.cli.commands.issue.close_cmd import close_issue
from ghi.cli.commands.issue.create_cmd import create_issue
from ghi.cli.commands.issue.list_cmd import list_issues
from ghi.cli.commands.issue.status_cmd import issue_status
from ghi.cli.commands.issue.view_cmd import view_issue
from ghi.cli.output import user_output
from ghi.core.context import GhiContext
from ghi.core.repo import parse_repo_spec


@click.group("issue")
@click.option(
    "-R",
    "--repo",
    "repo_spec",
    type=str,
    default=None,
    help="Select another repository using the [HOST/]OWNER/REPO format.",
)
@click.pass_context
def issue_group(ctx: click.Context, repo_spec: str | None) -> None:
    """Create and view issues."""
    if repo_spec is None:
        return

    ghi_ctx: GhiContext = ctx.obj
    try:
        repo = parse_repo_spec(repo_spec, ghi_ctx.config.host)
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
    ctx.obj = dataclasses.replace(ghi_ctx, repo_override=repo)


issue_group.add_command(close_issue)
issue_group.add_command(create_issue)
issue_group.add_command(list_issues)
issue_group.add_command(issue_status)
issue_group.add_command(view_issue)
