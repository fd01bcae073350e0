"""
The four acceptance rules, one function each.

Every rule takes an already-normalized word (see `validation.normalize`) and
returns True when the word passes. The pipeline in `validation.py` runs them
in a fixed order and stops at the first failure.
"""

from typing import Callable, Iterable

# Hard mode requires strictly more than this many letters (i.e. 4+).
HARD_MODE_MIN_LEN = 3


def is_long_enough(word: str, hard_mode: bool) -> bool:
    """
    Length gate. Normal mode only turns away the empty string; hard mode
    needs 4 or more letters.
    """
    return len(word) > (HARD_MODE_MIN_LEN if hard_mode else 0)


def is_original(word: str, used_words: Iterable[str]) -> bool:
    """True if `word` has not been accepted yet this round."""
    return word not in used_words


def is_possible(word: str, root: str) -> bool:
    """
    True if `word` can be spelled from the letters of `root`, each letter
    usable at most as many times as it appears in `root`.

    Letters are consumed greedily from a working copy of the root:
        is_possible("silk", "silkworm")      -> True
        is_possible("silkworms", "silkworm") -> False  (only one 's')
        is_possible("moor", "silkworm")      -> False  (only one 'o')
    """
    pool = list(root)
    for letter in word:
        try:
            pool.remove(letter)  # drops the first matching occurrence
        except ValueError:
            return False
    return True


def is_real(word: str, is_real_word: Callable[[str], bool]) -> bool:
    # The root word itself is not excluded here.
    return bool(is_real_word(word))
