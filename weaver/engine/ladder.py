"""
The puzzle's legality rule.

Two words form a legal step iff they have the same length and differ in
exactly one position. Comparison is position-aligned and case-insensitive;
transpositions, insertions and deletions are never legal steps.
"""

from typing import Sequence


def count_differences(a: str, b: str) -> int:
    """
    Number of positions where `a` and `b` disagree (case-insensitive).

    Preconditions:
      - len(a) == len(b)

    Examples:
      count_differences("east", "vast") -> 1
      count_differences("east", "nest") -> 2
    """
    a = a.lower()
    b = b.lower()
    assert len(a) == len(b), "Words must be the same length"
    return sum(1 for x, y in zip(a, b) if x != y)


def is_one_letter_different(a: str, b: str) -> bool:
    """True iff a -> b is a legal single step. Different lengths are never legal."""
    return len(a) == len(b) and count_differences(a, b) == 1


def is_valid_ladder(path: Sequence[str]) -> bool:
    """Every adjacent pair in `path` is a legal step. Empty/one-word paths are valid."""
    return all(is_one_letter_different(a, b) for a, b in zip(path, path[1:]))
