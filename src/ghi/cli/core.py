"""Repository discovery for CLI commands."""

import logging

from ghi.cli.ensure import Ensure
from ghi.core.context import GhiContext
from ghi.core.repo import GitHubRepo, repo_from_remote_url

logger = logging.getLogger(__name__)

REMOTE_NAME = "origin"


def discover_base_repo(ctx: GhiContext) -> GitHubRepo:
    """Return the repository a command operates on.

    The --repo override wins; otherwise the `origin` remote of the git
    repository containing the current directory is used.

    Raises:
        SystemExit: If no repository can be determined
    """
    if ctx.repo_override is not None:
        return ctx.repo_override

    repo_root = Ensure.not_none(
        ctx.git.get_repository_root(ctx.cwd),
        "not a git repository; run inside a clone or pass --repo OWNER/REPO",
    )
    remote_url = Ensure.not_none(
        ctx.git.get_remote_url(repo_root, REMOTE_NAME),
        f"no '{REMOTE_NAME}' remote found; pass --repo OWNER/REPO",
    )
    repo = Ensure.not_none(
        repo_from_remote_url(remote_url),
        f"'{REMOTE_NAME}' remote {remote_url} does not point to a GitHub repository",
    )
    logger.debug("Resolved base repository %s from %s", repo, remote_url)
    return repo
