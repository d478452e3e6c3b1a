"""Tests for the issue group's --repo option."""

from click.testing import CliRunner

from ghi.cli.cli import cli
from ghi.core.config_store import GlobalConfig
from ghi.core.context import GhiContext
from ghi.core.git.fake import FakeGit
from ghi.core.github.fake import FakeGitHubIssues
from ghi.core.repo import GitHubRepo
from tests.test_utils import make_issue


def test_repo_option_overrides_remote() -> None:
    issues = FakeGitHubIssues(issues={42: make_issue(42)})
    ctx = GhiContext.for_test(issues=issues)

    runner = CliRunner()
    result = runner.invoke(cli, ["issue", "-R", "acme/widgets", "view", "42", "-p"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert issues.fetched[0][0] == GitHubRepo(owner="acme", name="widgets")


def test_repo_option_works_outside_git_repository() -> None:
    issues = FakeGitHubIssues(next_issue_number=3)
    ctx = GhiContext.for_test(git=FakeGit(), issues=issues)

    runner = CliRunner()
    result = runner.invoke(
        cli, ["issue", "--repo", "acme/widgets", "create", "-t", "T", "-b", "B"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert "https://github.com/acme/widgets/issues/3" in result.output


def test_repo_option_uses_configured_host() -> None:
    issues = FakeGitHubIssues(issues={1: make_issue(1)})
    ctx = GhiContext.for_test(issues=issues, config=GlobalConfig(host="ghe.example.com"))

    runner = CliRunner()
    runner.invoke(cli, ["issue", "-R", "acme/widgets", "view", "1", "-p"], obj=ctx)

    assert issues.fetched[0][0].host == "ghe.example.com"


def test_repo_option_invalid() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["issue", "-R", "widgets", "list"], obj=GhiContext.for_test())

    assert result.exit_code == 1
    assert 'expected the "[HOST/]OWNER/REPO" format, got "widgets"' in result.output


def test_remote_repository_used_by_default() -> None:
    issues = FakeGitHubIssues(issues={1: make_issue(1)})
    git = FakeGit(
        repository_root=GhiContext.for_test().cwd,
        remote_urls={"origin": "git@github.com:team/tool.git"},
    )
    ctx = GhiContext.for_test(git=git, issues=issues)

    runner = CliRunner()
    runner.invoke(cli, ["issue", "view", "1", "-p"], obj=ctx)

    assert issues.fetched[0][0] == GitHubRepo(owner="team", name="tool")


def test_missing_origin_remote() -> None:
    git = FakeGit(repository_root=GhiContext.for_test().cwd, remote_urls={})
    ctx = GhiContext.for_test(git=git)

    runner = CliRunner()
    result = runner.invoke(cli, ["issue", "list"], obj=ctx)

    assert result.exit_code == 1
    assert "no 'origin' remote found" in result.output
