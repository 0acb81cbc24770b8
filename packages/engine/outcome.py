"""
Outcome values returned by a guess submission.

A submission either succeeds (Accepted) or fails on exactly one rule
(Rejected, tagged with a Reason and the root word it was checked against).
The presentation layer shows each rejection as a title/message pair;
EMPTY_INPUT is silent and has neither.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Reason(str, Enum):
    EMPTY_INPUT = "empty_input"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_RECOGNIZED = "not_recognized"


# (title, message template); {root} is filled with the session's root word
_TEXT: Dict[Reason, Tuple[str, str]] = {
    Reason.ALREADY_USED: ("Word already used", "Please select another!"),
    Reason.NOT_POSSIBLE: ("Word not possible", "That word cannot be spelled from {root}!"),
    Reason.NOT_RECOGNIZED: ("Word not recognized", "The word is either misspelled or made up!"),
}


@dataclass(frozen=True)
class Accepted:
    word: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    word: str
    reason: Reason
    root_word: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def silent(self) -> bool:
        """True when nothing should be shown to the player."""
        return self.reason not in _TEXT

    @property
    def title(self) -> Optional[str]:
        text = _TEXT.get(self.reason)
        return text[0] if text else None

    @property
    def message(self) -> Optional[str]:
        text = _TEXT.get(self.reason)
        return text[1].format(root=self.root_word) if text else None
