"""Command to create an issue."""

import logging
from pathlib import Path
from typing import assert_never
from urllib.parse import urlencode, urlparse

import click

from ghi.cli.commands.issue.shared import build_title_body
from ghi.cli.core import discover_base_repo
from ghi.cli.ensure import Ensure
from ghi.cli.output import machine_output, user_output
from ghi.core.context import GhiContext
from ghi.core.prompt.types import TitleBodyAction
from ghi.core.repo import GitHubRepo
from ghi.core.templates import ISSUE_TEMPLATE, find_templates, load_templates

logger = logging.getLogger(__name__)


def discover_template_paths(ctx: GhiContext) -> list[Path]:
    """Find issue templates in the current repository, or none outside one."""
    repo_root = ctx.git.get_repository_root(ctx.cwd)
    if repo_root is None:
        logger.debug("No repository root for %s; skipping template discovery", ctx.cwd)
        return []
    return find_templates(repo_root, ISSUE_TEMPLATE)


def web_create_url(repo: GitHubRepo, template_paths: list[Path]) -> str:
    """URL of the browser form, or the template chooser when several templates exist."""
    url = repo.new_issue_url()
    if len(template_paths) > 1:
        url += "/choose"
    return url


def preview_url(repo: GitHubRepo, title: str, body: str) -> str:
    """URL of the browser form pre-filled with title and body.

    The body is not shortened, so very long drafts can exceed the URL length
    some browsers accept.
    """
    return repo.new_issue_url() + "?" + urlencode({"title": title, "body": body})


@click.command("create")
@click.option("-t", "--title", type=str, default=None, help="Supply a title. Prompts if omitted.")
@click.option("-b", "--body", type=str, default=None, help="Supply a body. Prompts if omitted.")
@click.option("-w", "--web", is_flag=True, help="Open the browser to create an issue.")
@click.pass_obj
def create_issue(ctx: GhiContext, title: str | None, body: str | None, web: bool) -> None:
    """Create a new issue.

    Title and body come from --title/--body; whatever is missing is collected
    interactively, where the draft can be submitted, previewed in the browser,
    or discarded.
    """
    repo = discover_base_repo(ctx)
    user_output()
    user_output(f"Creating issue in {repo.full_name}")
    user_output()

    template_paths = discover_template_paths(ctx)

    try:
        if web:
            url = web_create_url(repo, template_paths)
            user_output(f"Opening {url} in your browser.")
            ctx.browser.open(url)
            return

        repo_info = ctx.issues.get_repo_info(repo)
        Ensure.invariant(
            repo_info.has_issues_enabled,
            f"the '{repo.full_name}' repository has disabled issues",
        )

        interactive = not title or not body
        if interactive:
            Ensure.invariant(
                ctx.can_prompt,
                "must provide --title and --body when not running interactively",
            )
        templates = load_templates(template_paths) if interactive else []

        draft = build_title_body(ctx.prompter, title, body, templates)

        match draft.action:
            case TitleBodyAction.CANCEL:
                user_output("Discarding.")
            case TitleBodyAction.PREVIEW:
                url = preview_url(repo, draft.title, draft.body)
                parsed = urlparse(url)
                user_output(f"Opening {parsed.netloc}{parsed.path} in your browser.")
                ctx.browser.open(url)
            case TitleBodyAction.SUBMIT:
                result = ctx.issues.create_issue(repo, draft.title, draft.body)
                logger.debug("Created issue #%d in %s", result.number, repo)
                machine_output(result.url)
            case _:
                assert_never(draft.action)
    except (RuntimeError, ValueError, OSError) as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
