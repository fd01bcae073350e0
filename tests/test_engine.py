import pytest
from wordscramble.engine import (
    Accepted, Rejected, RejectReason,
    is_long_enough, is_possible, normalize, validate_word,
)

WORDS = {"silk", "worm", "silkworm", "silkworms", "owl", "milk", "skim"}


def _validate(word, used=(), hard=False, root="silkworm"):
    return validate_word(word, root=root, used_words=list(used), hard_mode=hard,
                         is_real_word=WORDS.__contains__)


# --- derivability golden table (multiset semantics) ---
@pytest.mark.parametrize("word,root,expected", [
    ("silk", "silkworm", True),
    ("worm", "silkworm", True),
    ("silkworm", "silkworm", True),
    ("mows", "silkworm", True),
    ("silkworms", "silkworm", False),  # only one 's'
    ("moor", "silkworm", False),       # only one 'o'
    ("zoo", "silkworm", False),
    ("", "silkworm", True),
    ("letter", "letters", True),
    ("settee", "letters", False),      # three e's, root has two
])
def test_is_possible_golden(word, root, expected):
    assert is_possible(word, root) is expected


@pytest.mark.parametrize("word,hard,expected", [
    ("", False, False),
    ("a", False, True),
    ("owl", False, True),
    ("owl", True, False),
    ("silk", True, True),
    ("", True, False),
])
def test_is_long_enough(word, hard, expected):
    assert is_long_enough(word, hard) is expected


def test_normalize():
    assert normalize("  SiLk \n") == "silk"
    assert normalize("\t ") == ""


def test_accepts_valid_word():
    r = _validate("silk")
    assert r == Accepted("silk")
    assert r.accepted is True and r.word == "silk"


@pytest.mark.parametrize("word,used,hard,reason", [
    ("", (), False, RejectReason.TOO_SHORT),
    ("", (), True, RejectReason.TOO_SHORT),
    ("owl", (), True, RejectReason.TOO_SHORT),
    ("zzz", (), True, RejectReason.TOO_SHORT),          # length checked before letters
    ("silk", ("silk",), False, RejectReason.ALREADY_USED),
    ("silkworms", (), False, RejectReason.NOT_POSSIBLE),  # real word, but not spellable
    ("wilk", (), False, RejectReason.NOT_A_WORD),
])
def test_first_failing_rule_wins(word, used, hard, reason):
    r = _validate(word, used, hard)
    assert isinstance(r, Rejected)
    assert r.accepted is False
    assert r.reason is reason


def test_rejection_text():
    r = _validate("silkworms")
    assert r.title == "Word not possible"
    assert r.message == "You can't spell silkworms from silkworm"
    assert _validate("", hard=True).message == "Choose 4 or more letters."
    assert _validate("silk", ("silk",)).title == "Word already used"
    assert _validate("wilk").title == "Come on."


def test_root_word_itself_is_accepted():
    assert _validate("silkworm") == Accepted("silkworm")


def test_dictionary_not_consulted_for_impossible_words():
    calls = []

    def checker(word):
        calls.append(word)
        return True

    r = validate_word("zebra", root="silkworm", used_words=[], hard_mode=False, is_real_word=checker)
    assert r.reason is RejectReason.NOT_POSSIBLE
    assert calls == []
