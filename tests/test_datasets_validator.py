from pathlib import Path
from wordscramble.datasets import validate_root_list, pretty_summary, read_words, write_words
from wordscramble.lexicon import START_WORDS_PATH, WordSetChecker


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_bundled_list_passes():
    rep = validate_root_list(START_WORDS_PATH, min_len=8)
    assert rep["passed"] is True, rep["issues"]
    assert rep["dictionary_checked"] is False


def test_validate_root_list_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "notebook", "", "umbrella"])

    rep = validate_root_list(p, min_len=8)
    assert rep["passed"] is True
    assert rep["roots"]["count"] == 3
    assert rep["roots"]["blank_lines"] == 1
    s = pretty_summary(rep)
    assert "roots=3" in s and "unknown=n/a" in s and s.endswith("OK")


def test_validate_root_list_flags_errors(tmp_path: Path):
    p = tmp_path / "start.txt"
    # 'owl' too short for min_len=4, 'Silkworm' not lowercase, '???' invalid chars, duplicate 'notebook'
    p.write_text("notebook\nowl\nSilkworm\n???\nnotebook\n", encoding="utf-8")

    rep = validate_root_list(p, min_len=4)
    assert rep["passed"] is False
    assert rep["roots"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_root_list_dictionary(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "qwertyui"])

    rep = validate_root_list(p, checker=WordSetChecker(["silkworm"]))
    assert rep["passed"] is False
    assert rep["roots"]["unknown_words"] == ["qwertyui"]
    assert "unknown=1" in pretty_summary(rep)


def test_validate_root_list_missing(tmp_path: Path):
    rep = validate_root_list(tmp_path / "missing.txt")
    assert rep["passed"] is False
    assert rep["roots"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_read_write_words(tmp_path: Path):
    p = write_words(["silk", "worm"], tmp_path / "sub" / "w.txt")
    assert Path(p).read_text(encoding="utf-8") == "silk\nworm\n"
    assert read_words(p) == ["silk", "worm"]
