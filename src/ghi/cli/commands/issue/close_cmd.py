"""Command to close an issue."""

import click

from ghi.cli.commands.issue.shared import NoCandidatesError, issue_from_arg, select_issue_number
from ghi.cli.core import discover_base_repo
from ghi.cli.ensure import Ensure
from ghi.cli.output import user_output
from ghi.core.context import GhiContext
from ghi.core.github.types import Issue
from ghi.core.repo import GitHubRepo

CLOSE_FIELDS = ("id", "number", "title", "state")


def _close(ctx: GhiContext, repo: GitHubRepo, issue: Issue) -> None:
    if issue.is_pull_request:
        ctx.issues.close_pull_request(repo, issue.id)
    else:
        ctx.issues.close_issue(repo, issue.id)


@click.command("close")
@click.argument("selector", type=str, required=False)
@click.pass_obj
def close_issue(ctx: GhiContext, selector: str | None) -> None:
    """Close an issue by number or GitHub URL.

    Without SELECTOR, pick from recently viewed issues (interactive sessions only).
    """
    if selector is None:
        Ensure.invariant(ctx.can_prompt, "interactive mode required with no arguments")

    base_repo = discover_base_repo(ctx)

    try:
        if selector is None:
            try:
                selector = select_issue_number(ctx.frecency, ctx.prompter, base_repo, False)
            except NoCandidatesError:
                user_output("No recent issues to choose from")
                return
            if selector is None:
                user_output("No issue selected.")
                return

        issue, repo = issue_from_arg(ctx.issues, base_repo, selector, CLOSE_FIELDS)

        if issue.state == "CLOSED":
            user_output(
                f"{click.style('!', fg='yellow')} Issue #{issue.number} ({issue.title}) "
                "is already closed"
            )
            return

        _close(ctx, repo, issue)
        ctx.frecency.delete_by_number(repo, issue.is_pull_request, issue.number)
    except (RuntimeError, ValueError) as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    noun = "pull request" if issue.is_pull_request else "issue"
    user_output(f"{click.style('✓', fg='red')} Closed {noun} #{issue.number} ({issue.title})")
