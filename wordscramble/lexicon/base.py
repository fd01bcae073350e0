from __future__ import annotations
import random
from pathlib import Path
from typing import Iterable, List, Optional

from .loader import load_root_candidates
from .spelling import MIN_ZIPF, SpellChecker, WordChecker

# Used when the candidate list is empty.
DEFAULT_ROOT_WORD = "silkworm"


class Lexicon:
    """
    Root-word candidates plus a real-word test.

    The checker is anything with `is_real_word(word) -> bool`; production code
    uses the wordfreq-backed SpellChecker.
    """

    def __init__(self, candidates: Iterable[str], checker: WordChecker):
        self.candidates: List[str] = list(candidates)
        self.checker = checker

    @classmethod
    def load(cls, path: Optional[Path | str] = None, *, min_zipf: float = MIN_ZIPF) -> "Lexicon":
        """Bundled (or given) word list + default spell checker."""
        return cls(load_root_candidates(path), SpellChecker(min_zipf=min_zipf))

    def pick_root(self, rng: random.Random) -> str:
        if not self.candidates:
            return DEFAULT_ROOT_WORD
        return rng.choice(self.candidates)

    def is_real_word(self, word: str) -> bool:
        return self.checker.is_real_word(word)
