"""
Root-word candidates from the bundled word list.

The list ships inside the package (data/start.txt). The game cannot run
without it, so any failure to read it surfaces as LexiconLoadError, which the
core never catches: it marks a packaging/deployment defect, not a user error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from wordscramble.datasets.io import read_words

logger = logging.getLogger(__name__)

START_WORDS_PATH = Path(__file__).parent / "data" / "start.txt"


class LexiconLoadError(RuntimeError):
    """The root-word list is missing or unreadable."""


def load_root_candidates(path: Optional[Path | str] = None) -> List[str]:
    """
    Return every candidate root word (lower-cased, blanks dropped).

    Args:
      path : word list to read; defaults to the bundled start.txt

    Raises:
      LexiconLoadError if the file is missing, not UTF-8, or otherwise unreadable.
    """
    p = Path(path) if path is not None else START_WORDS_PATH
    try:
        words = read_words(p)
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconLoadError(f"Could not load {p}: {e}") from e
    logger.debug("loaded %d root candidates from %s", len(words), p)
    return words
