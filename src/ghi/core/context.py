"""Application context with dependency injection."""

import sys
from dataclasses import dataclass
from pathlib import Path

import click

from ghi.cli.output import user_output
from ghi.core.browser.abc import Browser
from ghi.core.browser.real import RealBrowser
from ghi.core.config_store import ConfigStore, GlobalConfig, RealConfigStore
from ghi.core.frecency.abc import FrecencyStore
from ghi.core.frecency.dry_run import DryRunFrecencyStore
from ghi.core.frecency.real import RealFrecencyStore
from ghi.core.git.abc import Git
from ghi.core.git.real import RealGit
from ghi.core.github.abc import GitHubIssues
from ghi.core.github.dry_run import DryRunGitHubIssues
from ghi.core.github.real import RealGitHubIssues
from ghi.core.prompt.abc import Prompter
from ghi.core.prompt.real import RealPrompter
from ghi.core.repo import GitHubRepo
from ghi.core.time.abc import Time
from ghi.core.time.real import RealTime


@dataclass(frozen=True)
class GhiContext:
    """Immutable context holding all dependencies for ghi operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime; the issue command
    group derives a copy carrying the --repo override.
    """

    git: Git
    issues: GitHubIssues
    frecency: FrecencyStore
    prompter: Prompter
    browser: Browser
    time: Time
    config_store: ConfigStore
    config: GlobalConfig
    cwd: Path  # Current working directory at CLI invocation
    can_prompt: bool  # Whether interactive prompts may be shown
    repo_override: GitHubRepo | None
    dry_run: bool

    @staticmethod
    def for_test(
        git: Git | None = None,
        issues: GitHubIssues | None = None,
        frecency: FrecencyStore | None = None,
        prompter: Prompter | None = None,
        browser: Browser | None = None,
        time: Time | None = None,
        config_store: ConfigStore | None = None,
        config: GlobalConfig | None = None,
        cwd: Path | None = None,
        can_prompt: bool = False,
        repo_override: GitHubRepo | None = None,
        dry_run: bool = False,
    ) -> "GhiContext":
        """Create test context with optional pre-configured integration classes.

        Every unspecified dependency is replaced by its in-memory fake. The default
        git fake sits in a repository whose origin is github.com/owner/repo.

        Example:
            >>> issues = FakeGitHubIssues(issues={42: issue})
            >>> ctx = GhiContext.for_test(issues=issues, can_prompt=True)
        """
        from ghi.core.browser.fake import FakeBrowser
        from ghi.core.config_store import FakeConfigStore
        from ghi.core.frecency.fake import FakeFrecencyStore
        from ghi.core.git.fake import FakeGit
        from ghi.core.github.fake import FakeGitHubIssues
        from ghi.core.prompt.fake import FakePrompter
        from ghi.core.time.fake import FakeTime

        if git is None:
            git = FakeGit(
                repository_root=Path("/test/repo"),
                remote_urls={"origin": "https://github.com/owner/repo.git"},
            )

        if issues is None:
            issues = FakeGitHubIssues()

        if frecency is None:
            frecency = FakeFrecencyStore()

        if prompter is None:
            prompter = FakePrompter()

        if browser is None:
            browser = FakeBrowser()

        if time is None:
            time = FakeTime()

        if config is None:
            config = GlobalConfig()

        if config_store is None:
            config_store = FakeConfigStore(config=config)

        # Apply dry-run wrappers if needed (matching production behavior)
        if dry_run:
            issues = DryRunGitHubIssues(issues)
            frecency = DryRunFrecencyStore(frecency)

        return GhiContext(
            git=git,
            issues=issues,
            frecency=frecency,
            prompter=prompter,
            browser=browser,
            time=time,
            config_store=config_store,
            config=config,
            cwd=cwd or Path("/test/repo"),
            can_prompt=can_prompt,
            repo_override=repo_override,
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> GhiContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap mutating dependencies with dry-run wrappers that
                 print intended actions without executing them

    Returns:
        GhiContext with real implementations
    """
    config_store = RealConfigStore()
    try:
        config = config_store.load()
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    time = RealTime()
    issues: GitHubIssues = RealGitHubIssues()
    frecency: FrecencyStore = RealFrecencyStore(Path.home() / ".ghi" / "frecency.json", time)

    if dry_run:
        issues = DryRunGitHubIssues(issues)
        frecency = DryRunFrecencyStore(frecency)

    can_prompt = config.prompts_enabled and sys.stdin.isatty() and sys.stdout.isatty()

    return GhiContext(
        git=RealGit(),
        issues=issues,
        frecency=frecency,
        prompter=RealPrompter(),
        browser=RealBrowser(),
        time=time,
        config_store=config_store,
        config=config,
        cwd=Path.cwd(),
        can_prompt=can_prompt,
        repo_override=None,
        dry_run=dry_run,
    )
