# apps/cli/replay.py
"""
Replay scripted submissions through the game engine.

This script:
  1) Validates the root word list (prints counts + SHA) when one is given.
  2) Parses the submissions file into rounds (see wordscramble.harness.core).
  3) Replays every round with a live progress indicator and writes:
       - CSV:  one row per submission with the verdict
       - JSON: manifest with config, totals, word-list report, git commit
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordscramble.datasets import validate_root_list, pretty_summary
from wordscramble.harness import parse_script, replay_round, write_csv, write_manifest
from wordscramble.harness.io import timestamp_id, git_commit_or_unknown
from wordscramble.lexicon import MIN_ZIPF, SpellChecker, WordSetChecker
from wordscramble.datasets.io import read_words


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordscramble — replay scripted submissions")
    ap.add_argument("--submissions", required=True,
                    help="one submission per line; '#round <root>' starts a round")
    ap.add_argument("--root", help="root word for entries before the first '#round' header")
    ap.add_argument("--hard", action="store_true", help="start every round in hard mode")
    ap.add_argument("--dictionary",
                    help="closed word list to use instead of wordfreq (one word per line)")
    ap.add_argument("--min-zipf", type=float, default=MIN_ZIPF,
                    help="lowest wordfreq Zipf score that counts as a real word")
    ap.add_argument("--words", help="root word list to validate and record in the manifest")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    checker = (WordSetChecker(read_words(args.dictionary)) if args.dictionary
               else SpellChecker(min_zipf=args.min_zipf))

    # 1) Optional word-list validation
    rep = None
    if args.words:
        rep = validate_root_list(args.words, checker=checker)
        print(pretty_summary(rep))

    # 2) Parse rounds
    lines = Path(args.submissions).read_text(encoding="utf-8").splitlines()
    script = parse_script(lines)
    for idx, (root, _) in enumerate(script, start=1):
        if not (root or args.root):
            ap.error(f"round {idx} has no root word; pass --root or add a '#round <word>' header")

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    total = len(script)
    iterator = tqdm(script, ncols=80, desc="Replaying", unit="round") if mode == "bar" else script

    results = []
    start = time.time()
    last_print = 0.0
    for idx, (root, entries) in enumerate(iterator, 1):
        r = replay_round(root or args.root, entries, checker=checker, hard_mode=args.hard)
        r["round"] = idx
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    accepted = sum(r["accepted"] for r in results)
    rejected = sum(r["rejected"] for r in results)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "totals": {
            "rounds": len(results),
            "submissions": accepted + rejected,
            "accepted": accepted,
            "rejected": rejected,
        },
    }
    write_manifest(manifest, str(manifest_path))

    print(f"accepted={accepted} rejected={rejected} over {len(results)} round(s)")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
