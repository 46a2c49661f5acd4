"""
Start/target selection.

- Fixed mode: always ("east", "west").
- Random mode: two distinct words drawn uniformly from the dictionary.
  Only lowercase N-letter words are eligible. They are sorted so a given
  seed always yields the same pair, then two distinct indices are taken from
  a uniform permutation.

Degenerate dictionaries:
  - no eligible word -> fall back to the fixed pair
  - a single word    -> start == target (the game is won immediately)
"""

from __future__ import annotations

from typing import Collection, Tuple

import numpy as np

from weaver.datasets import WORD_LENGTH

FIXED_START = "east"
FIXED_TARGET = "west"


def fixed_pair() -> Tuple[str, str]:
    return FIXED_START, FIXED_TARGET


def random_pair(words: Collection[str], rng: np.random.Generator,
                N: int = WORD_LENGTH) -> Tuple[str, str]:
    """
    Pick (start, target) uniformly at random, start != target whenever at
    least two eligible words exist.
    """
    pool = sorted(w for w in words if len(w) == N and w.isalpha() and w.islower())
    if not pool:
        return fixed_pair()
    if len(pool) == 1:
        return pool[0], pool[0]
    i, j = rng.permutation(len(pool))[:2]
    return pool[int(i)], pool[int(j)]


def choose_pair(words: Collection[str], *, random_words: bool,
                rng: np.random.Generator) -> Tuple[str, str]:
    """Dispatch on the random-words flag."""
    if random_words and words:
        return random_pair(words, rng)
    return fixed_pair()
