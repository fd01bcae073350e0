from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_words(p: Path | str) -> List[str]:
    """
    Read a newline-delimited UTF-8 word list.

    Each line is stripped and lower-cased; blank lines are dropped so a random
    pick can never land on an empty entry. Raises FileNotFoundError if the path
    doesn't exist, UnicodeDecodeError if it isn't UTF-8.
    """
    p = Path(p)
    if not p.is_file():
        raise FileNotFoundError(p)
    words = []
    for ln in p.read_text(encoding="utf-8").splitlines():
        w = ln.strip().lower()
        if w:
            words.append(w)
    return words


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line (UTF-8, trailing newline), creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(p)
