"""
Word list validator.

What this module does:
- Check one word list against a word length N: one word per line, a-z only
  (case-insensitive), exact length N.
- Count valid, unique, invalid (wrong length / non-alpha / blank) lines and
  compute the SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a one-line summary.

Lines of another length are normal in a general dictionary file, so they
are reported but only fail validation when nothing of length N remains.

Typical use:
    from wordle_solver.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one word list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words of length N
    unique_count: int    # unique valid words (after dedupe)
    other_length: int    # alphabetic lines of another length
    invalid_lines: int   # blank or non-alphabetic lines
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int, int]:
    """
    Returns:
      (valid_words, other_length_count, invalid_count)
    """
    valid: List[str] = []
    other = 0
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().lower()
            if not w or not (w.isascii() and w.isalpha()):
                invalid += 1
            elif len(w) != N:
                other += 1
            else:
                valid.append(w)

    return valid, other, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a word list for length N.

    Returns
    -------
    Dict
        JSON-serializable form of WordlistReport. `passed` requires the file
        to exist and to hold at least one valid N-letter word.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N, path, False, 0, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, other, invalid = _load_and_check(p, N)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append(f"word list contains 0 valid words of length {N}")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate word(s)")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        other_length=other,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, other_len=10, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"other_len={report['other_length']}, invalid={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )
