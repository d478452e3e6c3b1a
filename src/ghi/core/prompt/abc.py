"""Abstract interface for interactive prompts."""

from abc import ABC, abstractmethod

from ghi.core.github.types import Issue
from ghi.core.prompt.types import TitleBody
from ghi.core.templates import IssueTemplate


class Prompter(ABC):
    """Reads user choices from the controlling terminal."""

    @abstractmethod
    def collect_title_body(
        self, seed_title: str, seed_body: str, templates: list[IssueTemplate]
    ) -> TitleBody:
        """Ask for whatever parts of an issue are still missing, then for an action.

        Args:
            seed_title: Title already supplied ("" if none); not asked again when set
            seed_body: Body already supplied ("" if none); not asked again when set
            templates: Templates the user may pick to pre-fill the body

        Returns:
            TitleBody with the final title, body and chosen action
        """
        ...

    @abstractmethod
    def select_issue(self, candidates: list[Issue]) -> Issue | None:
        """Let the user pick one issue.

        Returns:
            The chosen issue, or None if the user declined to choose
        """
        ...
