"""
Root-word list validator for wordscramble.

What this module does:
- Validate a root-word list (start.txt): one lowercase a–z word per line.
- Optionally enforce a minimum length (roots shorter than that make dull rounds).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Optionally check every root against a dictionary checker (a root the
  dictionary rejects can still be played, but can never be entered itself).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_root_list, pretty_summary
    from wordscramble.lexicon import START_WORDS_PATH, SpellChecker
    rep = validate_root_list(START_WORDS_PATH, min_len=6, checker=SpellChecker())
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class ListReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    blank_lines: int     # empty/whitespace-only lines (tolerated, not invalid)
    unknown_words: List[str] = field(default_factory=list)  # rejected by the checker


@dataclass
class ValidationReport:
    """Top-level validation result for a root-word list."""
    min_len: int
    roots: ListReport
    dictionary_checked: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_len: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_len` letters
      - blank lines are skipped (the loader drops them too) but counted

    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if w == w.lower() and w.isalpha() and w.isascii() and len(w) >= min_len:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


def _as_dict(rep: ValidationReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_root_list(path: Path | str, min_len: int = 1, checker=None) -> Dict:
    """
    Validate a root-word list.

    Parameters
    ----------
    path : Path | str
        Word list to check (one word per line).
    min_len : int
        Shortest acceptable root word.
    checker : object with is_real_word(word) -> bool, optional
        When given, every valid root is also looked up in the dictionary.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid/blank counts
          - unknown words (if a checker was given)
          - `passed` boolean (strict: non-empty, no invalids, no duplicates,
            no unknown words)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []
    p = Path(path)

    if not p.is_file():
        issues.append(f"root word list not found: {path}")
        rep = ValidationReport(
            min_len=min_len,
            roots=ListReport(str(path), False, 0, "", 0, 0, 0),
            dictionary_checked=False,
            passed=False,
            issues=issues,
        )
        return _as_dict(rep)

    words, invalid, blank = _load_and_check(p, min_len)
    unique = set(words)

    unknown: List[str] = []
    if checker is not None:
        unknown = sorted(w for w in unique if not checker.is_real_word(w))

    report = ListReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        blank_lines=blank,
        unknown_words=unknown,
    )

    if report.count == 0:
        issues.append("root word list contains 0 valid words")
    if invalid:
        issues.append(f"root word list has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append("root word list contains duplicate lines")
    if unknown:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        issues.append(f"{len(unknown)} root(s) not recognized by the dictionary (e.g., {unknown[:5]})")

    passed = (
            report.count > 0
            and invalid == 0
            and report.count == report.unique_count
            and not unknown
    )

    rep = ValidationReport(
        min_len=min_len,
        roots=report,
        dictionary_checked=checker is not None,
        passed=passed,
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        roots=288 (uniq=288, sha=abc123...) | min_len=8 | unknown=0 | OK
    """
    r = report["roots"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (r.get("sha256") or "")[:12]
    unknown = len(r.get("unknown_words") or []) if report["dictionary_checked"] else "n/a"
    return (
        f"roots={r['count']} (uniq={r['unique_count']}, sha={sha}) "
        f"| min_len={report['min_len']} | unknown={unknown} | {status}"
    )
