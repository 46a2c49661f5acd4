"""
Dictionary validator for word weaver.

What this module does:
- Validate a dictionary file (one word per line) for a given word length N.
- Count valid, unique and invalid lines; compute SHA-256 of the raw file.
- Check the file can actually feed random games (needs at least two words).
- Return a machine-readable dict and provide a pretty one-line summary.

Unlike the loader, the validator is strict: lines the loader would silently
drop (wrong length, punctuation, blanks) are counted here as invalid so a bad
word list is noticed instead of quietly shrinking.

Typical use:
    from weaver.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("weaver/datasets/data/dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple

from .dictionary import WORD_LENGTH
from .io import clean_word, read_text

# Random games pick two distinct words.
MIN_RANDOM_WORDS = 2


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    N: int               # required word length
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID lines
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # lines the loader would drop
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _scan(text: str, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines are invalid.
    """
    valid: List[str] = []
    invalid = 0
    for raw in text.splitlines():
        w = clean_word(raw, N)
        if w is None:
            invalid += 1
        else:
            valid.append(w)
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str | Path, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns
    -------
    Dict
        JSON-serializable DictionaryReport with `passed` (strict: file exists,
        at least two unique words, no invalid lines) and `issues`.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(str(path), N, False, 0, 0, 0, "",
                               issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    text, sha = read_text(p)
    words, invalid = _scan(text, N)
    unique = set(words)

    rep = DictionaryReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=sha,
    )

    if rep.unique_count < MIN_RANDOM_WORDS:
        rep.issues.append(
            f"only {rep.unique_count} valid word(s); random games need {MIN_RANDOM_WORDS}")
    if invalid:
        rep.issues.append(f"{invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("contains duplicate words")

    rep.passed = rep.unique_count >= MIN_RANDOM_WORDS and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console/logs.

    Example:
        N=4 | words=812 (uniq=812, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    if not report["exists"]:
        return f"N={report['N']} | missing: {report['path']} | {status}"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
