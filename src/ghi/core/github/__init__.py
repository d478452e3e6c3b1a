"""GitHub issues integration.

Import from submodules:
- ghi.core.github.abc: GitHubIssues (ABC)
- ghi.core.github.real: RealGitHubIssues
- ghi.core.github.fake: FakeGitHubIssues
- ghi.core.github.dry_run: DryRunGitHubIssues
- ghi.core.github.types: Issue, IssueKind, LabelList, CreateIssueResult, ...
"""
