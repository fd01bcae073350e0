# apps/cli/play.py
"""
Interactive terminal front end for wordscramble.

Prints the root word, then reads one candidate per line:
  :new           start a new round (new root word, list cleared)
  :hard / :easy  toggle hard mode (4+ letters)
  :quit or EOF   exit
Anything else is submitted. Accepted words print with their letter count;
rejections print as "title: message".
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordscramble.engine import Accepted
from wordscramble.lexicon import MIN_ZIPF, LexiconLoadError
from wordscramble.session import GameSession, new_session


def _print_round(session: GameSession) -> None:
    mode = "hard" if session.hard_mode else "normal"
    print(f"\n== {session.root_word} ({mode} mode) ==")


def _print_words(session: GameSession) -> None:
    for word in session.used_words:
        print(f"  ({len(word)}) {word}")


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordscramble — make words from a root word")
    ap.add_argument("--hard", action="store_true", help="start in hard mode (4+ letters)")
    ap.add_argument("--seed", type=int, help="RNG seed for root word selection")
    ap.add_argument("--words", help="root word list (default: bundled start.txt)")
    ap.add_argument("--min-zipf", type=float, default=MIN_ZIPF,
                    help="lowest wordfreq Zipf score that counts as a real word")
    ap.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        session = new_session(args.words, hard_mode=args.hard, seed=args.seed, min_zipf=args.min_zipf)
    except LexiconLoadError as e:
        # Nothing to play without a word list.
        raise SystemExit(f"fatal: {e}")

    session.start_new_round()
    _print_round(session)

    for line in sys.stdin:
        command = line.strip().lower()
        if command == ":quit":
            break
        if command == ":new":
            session.start_new_round()
            _print_round(session)
            continue
        if command in (":hard", ":easy"):
            session.set_mode(command == ":hard")
            print(f"hard mode {'on' if session.hard_mode else 'off'}")
            continue

        verdict = session.submit(line)
        if isinstance(verdict, Accepted):
            _print_words(session)
        else:
            print(f"{verdict.title}: {verdict.message}")

    print(f"\n{len(session.used_words)} word(s) from {session.root_word}")


if __name__ == "__main__":
    main()
