"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:      flatten per-round results into a tidy CSV (one row per submission).
- write_manifest: dump a JSON manifest with config, word-list report, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

FIELDS = [
    "round", "root", "step", "input", "word", "hard_mode",
    "accepted", "reason", "title", "message",
]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize replayed rounds to CSV.

    Schema (columns):
      round, root, step, input, word, hard_mode, accepted, reason, title, message

    `reason`, `title` and `message` are empty for accepted words.
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()

        for r in results:
            for i, step in enumerate(r["steps"], start=1):
                row = {
                    "round": r.get("round", 1),
                    "root": r["root"],
                    "step": i,
                }
                row.update({k: step[k] for k in FIELDS[3:]})
                w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word-list summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - totals: rounds, submissions, accepted, rejected
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
