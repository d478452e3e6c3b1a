"""Formatting helpers shared by issue commands."""

import re
from datetime import datetime, timedelta

from ghi.core.github.types import Issue

_WHITESPACE_RE = re.compile(r"\s+")


def pluralize(count: int, noun: str) -> str:
    """Format a count with a naively pluralized noun.

    Examples:
        >>> pluralize(1, "comment")
        '1 comment'
        >>> pluralize(3, "comment")
        '3 comments'
    """
    if count == 1:
        return f"{count} {noun}"
    return f"{count} {noun}s"


def replace_excessive_whitespace(text: str) -> str:
    """Collapse runs of whitespace (including newlines) into single spaces."""
    return _WHITESPACE_RE.sub(" ", text.strip())


def truncate(max_length: int, text: str) -> str:
    """Shorten text to max_length characters, ending with "..." when cut."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def label_list(issue: Issue) -> str:
    """Join label names, marking lists the API returned only partially.

    Examples:
        "bug, ui"     all labels returned
        "bug, ui, …"  more labels exist than were returned
    """
    if not issue.labels.names:
        return ""

    joined = ", ".join(issue.labels.names)
    if issue.labels.is_truncated:
        joined += ", …"
    return joined


def _fmt_duration(amount: int, unit: str) -> str:
    return f"about {pluralize(amount, unit)} ago"


def format_relative_time(then: datetime, now: datetime) -> str:
    """Describe how long ago `then` was, e.g. "about 2 days ago"."""
    ago = now - then
    if ago < timedelta(minutes=1):
        return "less than a minute ago"
    if ago < timedelta(hours=1):
        return _fmt_duration(int(ago.total_seconds() // 60), "minute")
    if ago < timedelta(days=1):
        return _fmt_duration(int(ago.total_seconds() // 3600), "hour")
    if ago < timedelta(days=30):
        return _fmt_duration(ago.days, "day")
    if ago < timedelta(days=365):
        return _fmt_duration(ago.days // 30, "month")
    return _fmt_duration(ago.days // 365, "year")
