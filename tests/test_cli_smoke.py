import io
import json
from pathlib import Path

import pytest
from apps.cli import play, replay


def test_play_session(tmp_path: Path, monkeypatch, capsys):
    words = tmp_path / "start.txt"
    words.write_text("silkworm\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("silk\nSILK\n:hard\nowl\n:quit\nworm\n"))

    play.main(["--words", str(words)])
    out = capsys.readouterr().out
    assert "== silkworm (normal mode) ==" in out
    assert "(4) silk" in out
    assert "Word already used: Be more original!" in out
    assert "hard mode on" in out
    assert "Word too short: Choose 4 or more letters." in out
    assert "1 word(s) from silkworm" in out


def test_play_missing_word_list_exits(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        play.main(["--words", str(tmp_path / "missing.txt")])
    assert "fatal" in str(exc.value)


def test_replay_writes_outputs(tmp_path: Path, capsys):
    subs = tmp_path / "subs.txt"
    subs.write_text("silk\nworms\n#round notebook\nbook\n", encoding="utf-8")
    dictionary = tmp_path / "dict.txt"
    dictionary.write_text("silk\nworm\nworms\nbook\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    replay.main([
        "--submissions", str(subs), "--root", "silkworm",
        "--dictionary", str(dictionary), "--outdir", str(outdir), "--progress", "off",
    ])
    assert "accepted=3 rejected=0 over 2 round(s)" in capsys.readouterr().out

    manifests = list(outdir.glob("replay_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("replay_*.csv"))) == 1
    totals = json.loads(manifests[0].read_text(encoding="utf-8"))["totals"]
    assert totals == {"rounds": 2, "submissions": 3, "accepted": 3, "rejected": 0}
