"""Fake prompter for testing."""

from ghi.core.github.types import Issue
from ghi.core.prompt.abc import Prompter
from ghi.core.prompt.types import TitleBody, TitleBodyAction
from ghi.core.templates import IssueTemplate


class FakePrompter(Prompter):
    """Returns canned answers and records what it was asked."""

    def __init__(
        self,
        *,
        title: str = "Prompted title",
        body: str = "Prompted body",
        action: TitleBodyAction = TitleBodyAction.SUBMIT,
        selected_number: int | None = None,
    ) -> None:
        """Create FakePrompter.

        Args:
            title: Title answered when no seed title is given
            body: Body answered when no seed body is given
            action: Action answered by collect_title_body
            selected_number: Issue number picked by select_issue (None means cancel)
        """
        self._title = title
        self._body = body
        self._action = action
        self._selected_number = selected_number
        self._collect_calls: list[tuple[str, str, list[str]]] = []
        self._select_calls: list[list[int]] = []

    @property
    def collect_calls(self) -> list[tuple[str, str, list[str]]]:
        """collect_title_body calls as (seed_title, seed_body, template names)."""
        return self._collect_calls

    @property
    def select_calls(self) -> list[list[int]]:
        """select_issue calls as lists of candidate numbers."""
        return self._select_calls

    def collect_title_body(
        self, seed_title: str, seed_body: str, templates: list[IssueTemplate]
    ) -> TitleBody:
        self._collect_calls.append((seed_title, seed_body, [t.name for t in templates]))
        return TitleBody(
            title=seed_title or self._title,
            body=seed_body or self._body,
            action=self._action,
        )

    def select_issue(self, candidates: list[Issue]) -> Issue | None:
        self._select_calls.append([candidate.number for candidate in candidates])
        for candidate in candidates:
            if candidate.number == self._selected_number:
                return candidate
        return None
