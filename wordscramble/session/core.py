"""
Game session: the single owner of round state.

- start_new_round: pick a root word, clear the accepted list
- submit:          normalize a raw candidate, validate it, apply the verdict
- set_mode:        toggle hard mode (takes effect on the next submit)

The session has no locking. A UI that dispatches from several threads must
serialize its calls.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Tuple

from wordscramble.engine import Accepted, ValidationResult, normalize, validate_word
from wordscramble.lexicon import MIN_ZIPF, Lexicon

logger = logging.getLogger(__name__)

Listener = Callable[["GameSession"], None]


class RoundNotStartedError(RuntimeError):
    """submit() was called before start_new_round()."""


class GameSession:
    def __init__(self, lexicon: Lexicon, *, hard_mode: bool = False, seed: int | None = None):
        self.lexicon = lexicon
        self.rng = random.Random(seed)
        self._root_word = ""
        self._used_words: List[str] = []  # most-recent-first
        self._hard_mode = bool(hard_mode)
        self._listeners: List[Listener] = []

    # ---- read accessors ----

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used_words)

    @property
    def hard_mode(self) -> bool:
        return self._hard_mode

    @property
    def in_round(self) -> bool:
        return bool(self._root_word)

    # ---- operations ----

    def start_new_round(self) -> str:
        """Pick a fresh root word and discard any progress. Returns the root word."""
        self._root_word = self.lexicon.pick_root(self.rng)
        self._used_words = []
        logger.debug("new round: root=%s", self._root_word)
        self._notify()
        return self._root_word

    def submit(self, raw: str) -> ValidationResult:
        """
        Validate one raw candidate against the current round.

        On acceptance the normalized word goes to the front of `used_words`.
        A rejection leaves the session untouched, so resubmitting the same
        invalid word yields the same reason.
        """
        if not self.in_round:
            raise RoundNotStartedError("start_new_round() must be called before submit()")

        result = validate_word(
            normalize(raw),
            root=self._root_word,
            used_words=self._used_words,
            hard_mode=self._hard_mode,
            is_real_word=self.lexicon.is_real_word,
        )
        if isinstance(result, Accepted):
            self._used_words.insert(0, result.word)
            self._notify()
        else:
            logger.debug("rejected %r: %s", result.word, result.reason.value)
        return result

    def set_mode(self, hard: bool) -> None:
        self._hard_mode = bool(hard)
        self._notify()

    # ---- change notification ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call `listener(session)` after every state change (new round, accepted
        word, mode change). Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


def new_session(
        words_path: Optional[str] = None,
        *,
        hard_mode: bool = False,
        seed: int | None = None,
        min_zipf: float = MIN_ZIPF,
) -> GameSession:
    """Session over the bundled (or given) word list with the default spell checker."""
    return GameSession(Lexicon.load(words_path, min_zipf=min_zipf), hard_mode=hard_mode, seed=seed)
