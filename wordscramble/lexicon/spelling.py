"""
Real-word test backed by wordfreq.

wordfreq ships frequency tables for English with the package, so lookups are
local and synchronous. A word counts as "real" when its Zipf frequency
(log10 of occurrences per billion words) reaches `min_zipf`. Unknown tokens
score 0.0, so any positive threshold rejects them.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional, Protocol

from wordfreq import zipf_frequency

LANGUAGE = "en"

# ~1 occurrence per 30M words. Keeps ordinary words like "kilo" or "lorn"
# but drops tokenizer noise such as "rmk".
MIN_ZIPF = 1.5


class WordChecker(Protocol):
    def is_real_word(self, word: str) -> bool: ...


def _clean(word: str) -> Optional[str]:
    w = word.strip().lower()
    if not w or not w.isalpha():
        return None
    return w


class SpellChecker:
    """
    Case-insensitive English membership test.

    Empty, whitespace-only, or non-alphabetic input is never a real word.
    """

    def __init__(self, min_zipf: float = MIN_ZIPF, language: str = LANGUAGE):
        self.min_zipf = float(min_zipf)
        self.language = language
        # Per-instance cache so different thresholds don't share results.
        self._zipf = lru_cache(maxsize=50000)(self._lookup)

    def _lookup(self, word: str) -> float:
        return zipf_frequency(word, self.language)

    def zipf(self, word: str) -> float:
        w = _clean(word)
        return self._zipf(w) if w else 0.0

    def is_real_word(self, word: str) -> bool:
        w = _clean(word)
        if w is None:
            return False
        return self._zipf(w) >= self.min_zipf


class WordSetChecker:
    """Closed-world checker over a fixed word set (tests, offline replays)."""

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(w.strip().lower() for w in words if w.strip())

    def is_real_word(self, word: str) -> bool:
        w = _clean(word)
        return w is not None and w in self._words
