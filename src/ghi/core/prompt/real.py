"""Terminal prompts built on click."""

import click

from ghi.cli.output import user_output
from ghi.core.github.types import Issue
from ghi.core.prompt.abc import Prompter
from ghi.core.prompt.types import TitleBody, TitleBodyAction
from ghi.core.templates import IssueTemplate


class RealPrompter(Prompter):
    """Prompts on stderr so stdout stays reserved for command results.

    Ctrl-C or end of input raises click.Abort, which ends the whole command.
    """

    def collect_title_body(
        self, seed_title: str, seed_body: str, templates: list[IssueTemplate]
    ) -> TitleBody:
        title = seed_title
        if not title:
            title = click.prompt("Title", err=True).strip()

        body = seed_body
        if not body:
            starting_body = self._choose_template_body(templates)
            edited = click.edit(starting_body, extension=".md")
            # click.edit returns None when the editor exits without saving
            body = edited if edited is not None else starting_body

        choice = click.prompt(
            "What's next?",
            type=click.Choice([action.value for action in TitleBodyAction]),
            default=TitleBodyAction.SUBMIT.value,
            err=True,
        )
        return TitleBody(title=title, body=body, action=TitleBodyAction(choice))

    def _choose_template_body(self, templates: list[IssueTemplate]) -> str:
        if not templates:
            return ""

        user_output(click.style("Choose a template", bold=True))
        for index, template in enumerate(templates, start=1):
            user_output(f"  {index}. {template.name}")
        blank_choice = len(templates) + 1
        user_output(f"  {blank_choice}. Open a blank issue")

        choice = click.prompt(
            "Template", type=click.IntRange(1, blank_choice), default=1, err=True
        )
        if choice == blank_choice:
            return ""
        return templates[choice - 1].body

    def select_issue(self, candidates: list[Issue]) -> Issue | None:
        for index, candidate in enumerate(candidates, start=1):
            user_output(f"  {index}. #{candidate.number} {candidate.title}")

        while True:
            raw = click.prompt(
                "Which issue? (leave blank to cancel)",
                default="",
                show_default=False,
                err=True,
            ).strip()
            if not raw:
                return None
            if raw.isdecimal() and 1 <= int(raw) <= len(candidates):
                return candidates[int(raw) - 1]
            user_output(f"Enter a number between 1 and {len(candidates)}.")
