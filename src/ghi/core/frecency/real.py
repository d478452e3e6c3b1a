"""File-backed frecency store persisted as JSON."""

import json
import logging
import tempfile
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

from ghi.core.frecency.abc import FrecencyStore
from ghi.core.github.types import Issue, IssueKind
from ghi.core.repo import GitHubRepo
from ghi.core.time.abc import Time

logger = logging.getLogger(__name__)

# (maximum age, weight) pairs; older visits fall through to the last weight
_AGE_WEIGHTS = (
    (timedelta(days=4), 100),
    (timedelta(days=14), 70),
    (timedelta(days=31), 50),
    (timedelta(days=90), 30),
)
_STALE_WEIGHT = 10


@dataclass(frozen=True)
class FrecencyEntry:
    """One tracked issue as stored on disk."""

    repo: str
    kind: str
    number: int
    id: str
    title: str
    count: int
    last_accessed: str

    @property
    def last_accessed_at(self) -> datetime:
        return datetime.fromisoformat(self.last_accessed)


def frecency_score(count: int, last_accessed: datetime, now: datetime) -> int:
    """Weight a visit count by how long ago the issue was last touched.

    Examples:
        >>> from datetime import UTC
        >>> now = datetime(2024, 1, 15, tzinfo=UTC)
        >>> frecency_score(3, now - timedelta(days=1), now)
        300
        >>> frecency_score(3, now - timedelta(days=200), now)
        30
    """
    age = now - last_accessed
    for max_age, weight in _AGE_WEIGHTS:
        if age <= max_age:
            return count * weight
    return count * _STALE_WEIGHT


def _repo_key(repo: GitHubRepo) -> str:
    return f"{repo.host}/{repo.owner}/{repo.name}".lower()


def _kind_key(is_pr: bool) -> str:
    return "pr" if is_pr else "issue"


class RealFrecencyStore(FrecencyStore):
    """Production implementation storing entries in a JSON file.

    The file holds {"entries": [...]} and is rewritten on each mutation.
    """

    def __init__(self, path: Path, time: Time) -> None:
        """Initialize RealFrecencyStore.

        Args:
            path: JSON file location (created on first write)
            time: Clock used for ranking and access timestamps
        """
        self._path = path
        self._time = time

    def _load(self) -> list[FrecencyEntry]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            msg = f"Failed to read recent issues from {self._path}: {e}"
            raise RuntimeError(msg) from e

        if not isinstance(data, dict) or not isinstance(data.get("entries", []), list):
            msg = (
                f"Failed to read recent issues from {self._path}: "
                "expected an object with an entries list"
            )
            raise RuntimeError(msg)
        try:
            return [FrecencyEntry(**entry) for entry in data.get("entries", [])]
        except TypeError as e:
            msg = f"Failed to read recent issues from {self._path}: {e}"
            raise RuntimeError(msg) from e

    def _save(self, entries: list[FrecencyEntry]) -> None:
        payload: dict[str, Any] = {"entries": [asdict(entry) for entry in entries]}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # Replaced atomically; readers never see a partial file
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp.write(json.dumps(payload, indent=2))
            Path(tmp.name).replace(self._path)
        except OSError as e:
            msg = f"Failed to write recent issues to {self._path}: {e}"
            raise RuntimeError(msg) from e
        logger.debug("Saved %d frecency entries to %s", len(entries), self._path)

    def get_frecent(self, repo: GitHubRepo, is_pr: bool) -> list[Issue]:
        repo_key = _repo_key(repo)
        kind_key = _kind_key(is_pr)
        now = self._time.now()

        matching = [
            entry
            for entry in self._load()
            if entry.repo == repo_key and entry.kind == kind_key
        ]
        matching.sort(
            key=lambda entry: (
                frecency_score(entry.count, entry.last_accessed_at, now),
                entry.last_accessed_at,
            ),
            reverse=True,
        )

        kind = IssueKind.PULL_REQUEST if is_pr else IssueKind.ISSUE
        return [
            Issue(id=entry.id, number=entry.number, title=entry.title, state="OPEN", kind=kind)
            for entry in matching
        ]

    def delete_by_number(self, repo: GitHubRepo, is_pr: bool, number: int) -> None:
        repo_key = _repo_key(repo)
        kind_key = _kind_key(is_pr)
        entries = self._load()
        remaining = [
            entry
            for entry in entries
            if not (entry.repo == repo_key and entry.kind == kind_key and entry.number == number)
        ]
        if len(remaining) != len(entries):
            self._save(remaining)

    def record_access(self, repo: GitHubRepo, issue: Issue) -> None:
        repo_key = _repo_key(repo)
        kind_key = _kind_key(issue.is_pull_request)
        now = self._time.now().isoformat()

        entries = self._load()
        updated: list[FrecencyEntry] = []
        found = False
        for entry in entries:
            if entry.repo == repo_key and entry.kind == kind_key and entry.number == issue.number:
                entry = FrecencyEntry(
                    repo=repo_key,
                    kind=kind_key,
                    number=issue.number,
                    id=issue.id,
                    title=issue.title,
                    count=entry.count + 1,
                    last_accessed=now,
                )
                found = True
            updated.append(entry)

        if not found:
            updated.append(
                FrecencyEntry(
                    repo=repo_key,
                    kind=kind_key,
                    number=issue.number,
                    id=issue.id,
                    title=issue.title,
                    count=1,
                    last_accessed=now,
                )
            )
        self._save(updated)
