"""
Replay harness primitives.

- parse_script: split a submissions file into scripted rounds.
- replay_round: feed one round's submissions through a fresh GameSession.
- run_batch:    replay many rounds back-to-back.

A round is pinned to its root word by giving the session a one-word lexicon,
so the session code path is exactly the one a UI would drive.

Script format (one entry per line):
    #round silkworm     start a new round with this root (optional header)
    :hard / :easy       switch mode for the following submissions
    silk                any other line is submitted as-is
Blank lines and lines starting with "##" are ignored.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Optional, Tuple

from wordscramble.engine import Accepted
from wordscramble.lexicon import Lexicon
from wordscramble.session import GameSession

ROUND_HEADER = "#round"
HARD_COMMAND = ":hard"
EASY_COMMAND = ":easy"

# (root word or None, entries)
Script = List[Tuple[Optional[str], List[str]]]


def parse_script(lines: Iterable[str]) -> Script:
    """
    Group lines into rounds. Entries before the first header belong to a
    round whose root is None (the caller supplies it).
    """
    rounds: Script = []
    current: Optional[Tuple[Optional[str], List[str]]] = None

    for raw in lines:
        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith("##"):
            continue
        if stripped.startswith(ROUND_HEADER):
            root = stripped[len(ROUND_HEADER):].strip().lower()
            if not root:
                raise ValueError(f"round header without a root word: {line!r}")
            current = (root, [])
            rounds.append(current)
            continue
        if current is None:
            current = (None, [])
            rounds.append(current)
        current[1].append(line)

    return rounds


def replay_round(root: str, entries: Iterable[str], *, checker, hard_mode: bool = False) -> Dict:
    """
    Play one scripted round.

    Args:
        root:      root word for the round
        entries:   raw submissions and :hard/:easy mode switches, in order
        checker:   dictionary checker (anything with is_real_word)
        hard_mode: mode at round start

    Returns:
        dict with keys:
            root (str), hard_mode (bool, at start), steps (list of dicts),
            accepted (int), rejected (int), used_words (list, most-recent-first),
            time_ms (float)
    """
    session = GameSession(Lexicon([root], checker), hard_mode=hard_mode)
    session.start_new_round()

    steps: List[Dict] = []
    t0 = time.perf_counter()
    for entry in entries:
        command = entry.strip().lower()
        if command == HARD_COMMAND:
            session.set_mode(True)
            continue
        if command == EASY_COMMAND:
            session.set_mode(False)
            continue

        verdict = session.submit(entry)
        step = {
            "input": entry,
            "word": verdict.word,
            "hard_mode": session.hard_mode,
            "accepted": verdict.accepted,
            "reason": "",
            "title": "",
            "message": "",
        }
        if not isinstance(verdict, Accepted):
            step.update(reason=verdict.reason.value, title=verdict.title, message=verdict.message)
        steps.append(step)
    dt = (time.perf_counter() - t0) * 1000.0

    accepted = sum(1 for s in steps if s["accepted"])
    return {
        "root": session.root_word,
        "hard_mode": hard_mode,
        "steps": steps,
        "accepted": accepted,
        "rejected": len(steps) - accepted,
        "used_words": list(session.used_words),
        "time_ms": dt,
    }


def run_batch(
        script: Script,
        *,
        checker,
        default_root: Optional[str] = None,
        hard_mode: bool = False,
) -> List[Dict]:
    """
    Replay every round in `script`. Rounds without a header use `default_root`;
    it is an error if one is needed and missing.
    """
    out: List[Dict] = []
    for idx, (root, entries) in enumerate(script, start=1):
        root = root or default_root
        if not root:
            raise ValueError(f"round {idx} has no root word (add a '{ROUND_HEADER} <word>' header)")
        r = replay_round(root, entries, checker=checker, hard_mode=hard_mode)
        r["round"] = idx
        out.append(r)
    return out
