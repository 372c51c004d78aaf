from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def clean_words(lines: Iterable[str], N: int | None = None) -> List[str]:
    """
    Strip and lowercase, drop blanks and repeats (first occurrence wins).
    With `N`, also keep only ASCII-alphabetic words of exactly that length.
    """
    seen = set()
    out: List[str] = []
    for ln in lines:
        w = ln.strip().lower()
        if not w or w in seen:
            continue
        if N is not None and (len(w) != N or not (w.isascii() and w.isalpha())):
            continue
        seen.add(w)
        out.append(w)
    return out


def load_words(p: Path | str, N: int | None = None) -> List[str]:
    """Read a word list file and clean it (see clean_words)."""
    return clean_words(read_lines(p), N)
