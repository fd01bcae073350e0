from .base import DEFAULT_ROOT_WORD, Lexicon
from .loader import START_WORDS_PATH, LexiconLoadError, load_root_candidates
from .spelling import LANGUAGE, MIN_ZIPF, SpellChecker, WordSetChecker

__all__ = [
    "DEFAULT_ROOT_WORD", "Lexicon",
    "START_WORDS_PATH", "LexiconLoadError", "load_root_candidates",
    "LANGUAGE", "MIN_ZIPF", "SpellChecker", "WordSetChecker",
]
