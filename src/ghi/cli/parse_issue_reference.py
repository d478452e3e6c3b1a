"""Parse issue reference from user input."""

import re
from dataclasses import dataclass

from ghi.core.repo import GitHubRepo

_NUMBER_PATTERN = re.compile(r"[0-9]+")


class InvalidIssueReferenceError(ValueError):
    """Raised when a selector is neither an issue number nor an issue URL."""


@dataclass(frozen=True)
class IssueReference:
    """Parsed selector.

    `repo` is set only when the selector was a URL; it then takes precedence
    over the repository the command would otherwise operate on.
    """

    number: int
    repo: GitHubRepo | None


def parse_issue_reference(reference: str, host: str) -> IssueReference:
    """Parse an issue number from a plain number or a GitHub URL.

    Accepts:
      - Plain number: "123" (leading zeros allowed, no sign)
      - Issue URL: "https://github.com/owner/repo/issues/123"
      - Pull request URL: "https://github.com/owner/repo/pull/123"

    The number may be followed by a trailing slash, a query or a fragment. The host
    matches case-insensitively.

    Raises:
        InvalidIssueReferenceError: If the reference matches neither form

    Examples:
        >>> parse_issue_reference("0042", "github.com").number
        42
        >>> ref = parse_issue_reference("https://github.com/acme/widgets/issues/7", "github.com")
        >>> (ref.repo.full_name, ref.number)
        ('acme/widgets', 7)
    """
    if _NUMBER_PATTERN.fullmatch(reference):
        return IssueReference(number=int(reference), repo=None)

    url_pattern = (
        rf"https://{re.escape(host)}/([^/]+)/([^/]+)/(?:issues|pull)/([0-9]+)"
        r"/?(?:[?#].*)?"
    )
    match = re.fullmatch(url_pattern, reference, re.IGNORECASE)
    if match is None:
        msg = f'invalid issue format: "{reference}"'
        raise InvalidIssueReferenceError(msg)

    owner, name, number = match.groups()
    return IssueReference(
        number=int(number),
        repo=GitHubRepo(owner=owner, name=name, host=host.lower()),
    )
