"""
Word-list validator.

What this module does:
- Check a word-list file line by line against the playable-word rules
  (exactly 5 letters A–Z, any case, one per line).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict and a pretty one-line summary.

Typical use:
    from wordle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words.txt")
    print(pretty_summary(rep))

Unlike load_words(), this never raises on bad content; it reports it.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle.engine import Word, WordParseError


@dataclass
class ValidationReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after normalization)
    invalid_lines: int   # non-blank lines that are not playable words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _check_lines(lines: List[str]) -> Tuple[List[Word], List[int]]:
    """
    Returns:
      (valid_words, invalid_line_numbers)
    """
    valid: List[Word] = []
    invalid: List[int] = []

    for line_no, raw in enumerate(lines, start=1):
        w = raw.strip()
        if not w:
            continue
        try:
            valid.append(Word.parse(w))
        except WordParseError:
            invalid.append(line_no)

    return valid, invalid


def validate_wordlist(path: str) -> Dict:
    """
    Validate one word-list file.

    `passed` requires the file to exist, hold at least one word and have no
    invalid lines. Duplicates are reported as an issue but do not fail.
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(path, False, 0, 0, 0, "", False,
                               [f"word list not found: {path}"])
        return asdict(rep)

    data = p.read_bytes()
    words, invalid = _check_lines(data.decode("utf-8").splitlines())
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        # a few line numbers are enough to find the problem
        issues.append(f"{len(invalid)} invalid line(s) (e.g., lines {invalid[:5]})")
    if len(unique) != len(words):
        issues.append("word list contains duplicate words")

    rep = ValidationReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=len(invalid),
        sha256=hashlib.sha256(data).hexdigest(),
        passed=bool(words) and not invalid,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        words.txt | words=20 (uniq=20, sha=abc123def456) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
