import random
from pathlib import Path

import pytest
from wordscramble.lexicon import (
    DEFAULT_ROOT_WORD, START_WORDS_PATH, Lexicon, LexiconLoadError,
    SpellChecker, WordSetChecker, load_root_candidates,
)


def test_bundled_list_loads():
    words = load_root_candidates()
    assert len(words) > 100
    assert "silkworm" in words
    assert all(w == w.strip().lower() and w for w in words)


def test_load_normalizes_and_drops_blanks(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\n  notebook  \n\n", encoding="utf-8")
    assert load_root_candidates(p) == ["silkworm", "notebook"]


def test_missing_list_is_fatal(tmp_path: Path):
    with pytest.raises(LexiconLoadError):
        load_root_candidates(tmp_path / "nope.txt")


def test_unreadable_list_is_fatal(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_bytes(b"\xff\xfe\xfa not utf-8")
    with pytest.raises(LexiconLoadError):
        load_root_candidates(p)


def test_pick_root_default_when_empty():
    lex = Lexicon([], WordSetChecker([]))
    assert lex.pick_root(random.Random(0)) == DEFAULT_ROOT_WORD


def test_lexicon_load_uses_bundled_list():
    lex = Lexicon.load()
    assert len(lex.candidates) == len(load_root_candidates(START_WORDS_PATH))
    assert isinstance(lex.checker, SpellChecker)


@pytest.mark.parametrize("word,expected", [
    ("silk", True),
    ("SILK", True),
    ("Worm", True),
    ("  milk ", True),
    ("", False),
    ("   ", False),
    ("xqzvkj", False),
    ("silk worm", False),
    ("silk1", False),
])
def test_spell_checker(word, expected):
    assert SpellChecker().is_real_word(word) is expected


def test_spell_checker_threshold():
    checker = SpellChecker(min_zipf=8.0)  # nothing is that frequent
    assert checker.zipf("the") > 5.0
    assert checker.is_real_word("the") is False


def test_word_set_checker_case_insensitive():
    checker = WordSetChecker(["Silk", " worm "])
    assert checker.is_real_word("SILK")
    assert checker.is_real_word("worm")
    assert not checker.is_real_word("")
    assert not checker.is_real_word("milk")
