"""GitHub repository identity and parsing."""

import re
from dataclasses import dataclass

DEFAULT_HOST = "github.com"

# https://host/owner/repo(.git), ssh://git@host/owner/repo(.git), git@host:owner/repo(.git)
_REMOTE_URL_PATTERNS = (
    re.compile(
        r"^(?:https?|git|ssh)://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?"
        r"/(?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$"
    ),
    re.compile(r"^(?:[^@/]+@)?(?P<host>[^/:]+):(?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$"),
)


@dataclass(frozen=True)
class GitHubRepo:
    """A repository on a GitHub host.

    Attributes:
        owner: Repository owner (user or organization login)
        name: Repository name
        host: Web host serving the repository (e.g., "github.com")
    """

    owner: str
    name: str
    host: str = DEFAULT_HOST

    @property
    def full_name(self) -> str:
        """Return "owner/name"."""
        return f"{self.owner}/{self.name}"

    @property
    def web_url(self) -> str:
        """Return the repository's web URL."""
        return f"https://{self.host}/{self.owner}/{self.name}"

    def issue_url(self, number: int) -> str:
        return f"{self.web_url}/issues/{number}"

    def new_issue_url(self) -> str:
        return f"{self.web_url}/issues/new"

    def __str__(self) -> str:
        return self.full_name


def parse_repo_spec(spec: str, default_host: str = DEFAULT_HOST) -> GitHubRepo:
    """Parse an "OWNER/REPO" or "HOST/OWNER/REPO" string.

    Full remote URLs are accepted too.

    Raises:
        ValueError: If the value does not name a repository
    """
    from_url = repo_from_remote_url(spec)
    if from_url is not None:
        return from_url

    parts = spec.split("/")
    if len(parts) == 2 and all(parts):
        return GitHubRepo(owner=parts[0], name=parts[1], host=default_host)
    if len(parts) == 3 and all(parts):
        return GitHubRepo(owner=parts[1], name=parts[2], host=parts[0].lower())

    msg = f'expected the "[HOST/]OWNER/REPO" format, got "{spec}"'
    raise ValueError(msg)


def repo_from_remote_url(url: str) -> GitHubRepo | None:
    """Extract the repository from a git remote URL.

    Returns:
        GitHubRepo, or None if the URL is not in a recognized format

    Examples:
        >>> repo_from_remote_url("git@github.com:acme/widgets.git")
        GitHubRepo(owner='acme', name='widgets', host='github.com')
        >>> repo_from_remote_url("https://github.com/acme/widgets")
        GitHubRepo(owner='acme', name='widgets', host='github.com')
    """
    stripped = url.strip()
    for pattern in _REMOTE_URL_PATTERNS:
        match = pattern.match(stripped)
        if match is not None:
            return GitHubRepo(
                owner=match.group("owner"),
                name=match.group("name"),
                host=match.group("host").lower(),
            )
    return None
