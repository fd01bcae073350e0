"""
Build a root-word list from wordfreq's English frequency ranking.

What it does:
- Takes the top-N English words from wordfreq (most frequent first).
- Keeps pure a–z words of exactly --length letters.
- De-duplicates while preserving frequency order (or sorts with --sort).
- Writes one word per line and prints a validation summary.

Usage:
    python -m script.build_start_list --out wordscramble/lexicon/data/start.txt
    # 7-letter roots, alphabetical:
    python -m script.build_start_list --length 7 --sort --out start_7.txt
"""

import argparse

from wordfreq import top_n_list

from wordscramble.datasets import validate_root_list, pretty_summary, write_words


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def select_roots(words, length: int) -> list[str]:
    picked = (w.strip().lower() for w in words)
    return unique_preserve_order(w for w in picked if len(w) == length and w.isascii() and w.isalpha())


def main():
    ap = argparse.ArgumentParser(description="Build a root word list from wordfreq.")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--length", type=int, default=8, help="root word length (default: 8)")
    ap.add_argument("--top", type=int, default=50000, help="how many frequent words to scan")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise frequency order)")
    args = ap.parse_args()

    roots = select_roots(top_n_list("en", args.top), args.length)
    if args.sort:
        roots = sorted(roots)

    write_words(roots, args.out)
    print(pretty_summary(validate_root_list(args.out, min_len=args.length)))
    print(f"Wrote {len(roots)} words to {args.out}")


if __name__ == "__main__":
    main()
