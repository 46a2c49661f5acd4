"""
Word-list file helpers.

- read_text:   UTF-8 text file -> (text, SHA-256 of the exact bytes read).
- clean_word:  one raw line -> lowercase word of length N, or None.
- write_words: sorted, de-duplicated word list -> text file, one per line.
"""

from __future__ import annotations
from pathlib import Path
import hashlib
from typing import Iterable, Optional, Tuple


def read_text(p: Path | str) -> Tuple[str, str]:
    """
    Read a UTF-8 word list in one go and fingerprint it.
    Returns (text, sha256_hex); the hash covers exactly the bytes decoded.
    Raises FileNotFoundError if the path doesn't exist.
    """
    data = Path(p).read_bytes()
    return data.decode("utf-8"), hashlib.sha256(data).hexdigest()


def clean_word(raw: str, N: int) -> Optional[str]:
    """
    Trim a raw line and return it lower-cased if it is exactly N ASCII letters.
    Anything else (blank, wrong length, digits, apostrophes, accents) -> None.
    """
    w = raw.strip()
    if len(w) != N or not (w.isascii() and w.isalpha()):
        return None
    return w.lower()


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write the unique words sorted alphabetically, one per line, with a
    trailing newline. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(sorted(set(words))) + "\n", encoding="utf-8")
    return str(p)
