"""
Dictionary provider.

Turns a line-oriented word source into the frozen set of playable words:
  - each line is trimmed
  - only entries of exactly N ASCII letters survive
  - survivors are lower-cased and de-duplicated

A missing or unreadable file is not fatal: the failure is logged and an empty
dictionary comes back. The game copes with that (fixed words still work,
random words fall back to the fixed pair).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Union

from .io import clean_word, read_text

logger = logging.getLogger(__name__)

# Puzzle words are always this long; the engine imports it from here.
WORD_LENGTH = 4

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_DICTIONARY = "dictionary.txt"

Source = Union[str, Path, Iterable[str]]


def default_dictionary_path() -> Path:
    """Path to the word list shipped with the package."""
    return DATA_DIR / DEFAULT_DICTIONARY


def load_dictionary(source: Source, N: int = WORD_LENGTH) -> FrozenSet[str]:
    """
    Load the playable words from `source`.

    Args:
      source : a file path (str / Path) or any iterable of raw lines
      N      : required word length

    Returns:
      frozenset of lowercase N-letter words (empty if the file can't be read)
    """
    if isinstance(source, (str, Path)):
        try:
            text, _ = read_text(source)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error loading dictionary %s: %s", source, e)
            return frozenset()
        lines: Iterable[str] = text.splitlines()
    else:
        lines = source

    words = set()
    for raw in lines:
        w = clean_word(raw, N)
        if w is not None:
            words.add(w)

    logger.debug("Loaded %d %d-letter words", len(words), N)
    return frozenset(words)
