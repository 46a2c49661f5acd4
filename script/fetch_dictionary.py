"""
Download a plain-text English word list and write the 4-letter subset.

What it does:
- Streams the list (one word per line) with a progress bar.
- Keeps only exact 4-letter ASCII alphabetic entries, lower-cased.
- De-duplicates, sorts, and writes one word per line.
- Prints the validator summary for the written file.

Usage:
    python -m script.fetch_dictionary --out weaver/datasets/data/dictionary.txt
    python -m script.fetch_dictionary --url https://example.org/words.txt --out /tmp/words.txt
"""

import argparse
from typing import Iterable, Set

import requests
from tqdm import tqdm

from weaver.datasets import WORD_LENGTH, pretty_summary, validate_dictionary, write_words
from weaver.datasets.io import clean_word

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def filter_words(lines: Iterable[str], N: int = WORD_LENGTH) -> Set[str]:
    out = set()
    for ln in lines:
        w = clean_word(ln, N)
        if w is not None:
            out.add(w)
    return out


def fetch_words(url: str = URL, N: int = WORD_LENGTH) -> Set[str]:
    with requests.get(url, stream=True, timeout=30) as r:
        r.raise_for_status()
        r.encoding = r.encoding or "utf-8"
        lines = r.iter_lines(decode_unicode=True)
        return filter_words(tqdm(lines, desc="Downloading", unit="line", ncols=80), N)


def main():
    ap = argparse.ArgumentParser(description="Fetch a 4-letter dictionary for word weaver")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="weaver/datasets/data/dictionary.txt")
    args = ap.parse_args()

    words = fetch_words(args.url)
    write_words(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")
    print(pretty_summary(validate_dictionary(args.out)))


if __name__ == "__main__":
    main()
