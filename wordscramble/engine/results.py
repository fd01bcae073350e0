"""
Validation verdicts.

A verdict is created fresh for every submission and never stored:
  - Accepted(word)                      : the normalized word passed every rule
  - Rejected(reason, word, title, msg)  : the first rule that failed, plus the
                                          text a UI can show as-is

Both variants expose `.accepted` and `.word` so callers can branch without
isinstance checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RejectReason(str, Enum):
    """Why a candidate was turned down (in pipeline order)."""
    TOO_SHORT = "too_short"
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_A_WORD = "not_a_word"


@dataclass(frozen=True)
class Accepted:
    word: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason
    word: str
    title: str
    message: str

    @property
    def accepted(self) -> bool:
        return False


ValidationResult = Union[Accepted, Rejected]


def too_short(word: str) -> Rejected:
    return Rejected(RejectReason.TOO_SHORT, word, "Word too short", "Choose 4 or more letters.")


def already_used(word: str) -> Rejected:
    return Rejected(RejectReason.ALREADY_USED, word, "Word already used", "Be more original!")


def not_possible(word: str, root: str) -> Rejected:
    return Rejected(
        RejectReason.NOT_POSSIBLE, word, "Word not possible", f"You can't spell {word} from {root}"
    )


def not_a_word(word: str) -> Rejected:
    return Rejected(RejectReason.NOT_A_WORD, word, "Come on.", "Use a real word!")
