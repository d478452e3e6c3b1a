"""Types produced by interactive issue composition."""

from dataclasses import dataclass
from enum import Enum


class TitleBodyAction(Enum):
    """What the user chose to do with a composed issue."""

    SUBMIT = "submit"
    PREVIEW = "preview"
    CANCEL = "cancel"


@dataclass(frozen=True)
class TitleBody:
    """Draft issue content together with the chosen action."""

    title: str
    body: str
    action: TitleBodyAction
