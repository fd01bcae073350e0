"""
Submission validation pipeline.

This module answers the question: "Should this candidate be accepted right now?"
Given the round state, a candidate is accepted iff, in this order:
  1) it is long enough for the current mode
  2) it has not been accepted before in this round
  3) it can be spelled from the root word's letters
  4) the dictionary recognizes it

The first failing rule decides the rejection; later rules are not evaluated.
Nothing here mutates the caller's state; the session applies the verdict.
"""

from typing import Callable, Iterable

from .results import (
    Accepted,
    ValidationResult,
    already_used,
    not_a_word,
    not_possible,
    too_short,
)
from .rules import is_long_enough, is_original, is_possible, is_real


def normalize(raw: str) -> str:
    """Lower-case and strip surrounding whitespace (including newlines)."""
    return raw.lower().strip()


def validate_word(
        word: str,
        *,
        root: str,
        used_words: Iterable[str],
        hard_mode: bool,
        is_real_word: Callable[[str], bool],
) -> ValidationResult:
    """
    Run the rule pipeline on an already-normalized `word`.

    Args:
      word         : normalized candidate (see `normalize`)
      root         : the current root word
      used_words   : words accepted so far this round
      hard_mode    : raises the minimum length to 4 when True
      is_real_word : dictionary membership test

    Returns:
      Accepted(word) or the Rejected verdict of the first failing rule.
    """
    if not is_long_enough(word, hard_mode):
        return too_short(word)

    if not is_original(word, used_words):
        return already_used(word)

    if not is_possible(word, root):
        return not_possible(word, root)

    # Dictionary lookup last: it is the only non-trivial call.
    if not is_real(word, is_real_word):
        return not_a_word(word)

    return Accepted(word)
