"""
Move validation.

This module answers the question: "May this word be added to the ladder now?"
Checks run in a fixed order and the first failure wins:
  1. exact length N
  2. present in the dictionary
  3. not the word we are already on
  4. exactly one letter changed from the current word

The result is an ErrorCode (None when the move is legal) so the engine can
turn it into a user-facing notice, and tests can assert on the reason.
"""

from __future__ import annotations

from enum import Enum
from typing import Collection, Optional

from weaver.datasets import WORD_LENGTH
from .ladder import is_one_letter_different


class ErrorCode(str, Enum):
    INVALID_LENGTH = "invalid_length"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    NO_CHANGE = "no_change"
    TOO_MANY_DIFFERENCES = "too_many_differences"
    BUFFER_FULL = "buffer_full"


def error_message(code: ErrorCode, word: str = "", N: int = WORD_LENGTH) -> str:
    """Human-readable text for a rejected move."""
    if code is ErrorCode.INVALID_LENGTH:
        return f"{N} letters required"
    if code is ErrorCode.NOT_IN_DICTIONARY:
        return f"{word} not in dictionary"
    if code is ErrorCode.NO_CHANGE:
        return "same as current word"
    if code is ErrorCode.TOO_MANY_DIFFERENCES:
        return "change exactly 1 letter"
    return "buffer full"


def check_move(word: str, current: str, dictionary: Collection[str], N: int) -> Optional[ErrorCode]:
    """
    Validate `word` as the next step after `current`.

    Args:
      word       : candidate, already normalized (stripped, lowercase)
      current    : last word on the ladder
      dictionary : playable words (a set, for O(1) membership)
      N          : required word length

    Returns:
      None if the move is legal, otherwise the first failing ErrorCode.
    """
    if len(word) != N:
        return ErrorCode.INVALID_LENGTH
    if word not in dictionary:
        return ErrorCode.NOT_IN_DICTIONARY
    if word == current:
        return ErrorCode.NO_CHANGE
    if not is_one_letter_different(word, current):
        return ErrorCode.TOO_MANY_DIFFERENCES
    return None
