"""
Scoring (feedback) for a single (guess, target) pair.

Conventions:
  - CORRECT          ('G') : letter matches the target at this position
  - MISPLACED_LETTER ('Y') : letter occurs in the target, not at this position
  - ABSENT           ('-') : letter does not occur in the target

Two modes:

  "naive" (default)
      Single pass, membership test only. A guess with two of a letter
      where the target has one marks BOTH as misplaced (or correct +
      misplaced) instead of marking the extra one absent. This is a known
      deviation from the standard game rules and is kept on purpose:
      the constraint store and filter are built around it.

  "strict"
      Two-pass, duplicate-safe scoring:
        1) mark all exact matches and count the target's unmatched letters
        2) mark misplaced only while that letter still has remaining count
"""

from __future__ import annotations

from collections import Counter
from typing import List

from wordle_solver.config import SCORING_MODES
from .errors import InvalidLength
from .types import Correctness, Result, render_pattern


def _normalize(guess: str, target: str):
    guess = guess.strip().lower()
    target = target.strip().lower()
    if len(guess) != len(target):
        raise InvalidLength(len(target), len(guess))
    return guess, target


def _score_naive(guess: str, target: str) -> Result:
    out: List[Correctness] = []
    for g, t in zip(guess, target):
        if g == t:
            out.append(Correctness.CORRECT)
        elif g in target:
            out.append(Correctness.MISPLACED_LETTER)
        else:
            out.append(Correctness.ABSENT)
    return tuple(out)


def _score_strict(guess: str, target: str) -> Result:
    result = [Correctness.ABSENT] * len(guess)

    # Pass 1: exact matches; count what the target has left over
    remaining = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = Correctness.CORRECT
        else:
            remaining[t] += 1

    # Pass 2: misplaced, capped by the remaining multiplicity
    for i, g in enumerate(guess):
        if result[i] is Correctness.CORRECT:
            continue
        if remaining[g] > 0:
            result[i] = Correctness.MISPLACED_LETTER
            remaining[g] -= 1

    return tuple(result)


def score(guess: str, target: str, mode: str = "naive") -> Result:
    """
    Score `guess` against `target`.

    Raises:
      InvalidLength if the two words differ in length.
      ValueError    for an unknown mode.

    Examples:
      score("skirt", "shirt")           -> (G, -, G, G, G)
      score("speed", "abide")           -> (-, -, Y, Y, Y)   naive
      score("speed", "abide", "strict") -> (-, -, Y, -, Y)
    """
    if mode not in SCORING_MODES:
        raise ValueError(f"Unknown scoring mode: {mode!r}. Available: {list(SCORING_MODES)}")
    guess, target = _normalize(guess, target)
    if mode == "strict":
        return _score_strict(guess, target)
    return _score_naive(guess, target)


def score_pattern(guess: str, target: str, mode: str = "naive") -> str:
    """Same as score() but as a 'G' / 'Y' / '-' string."""
    return render_pattern(score(guess, target, mode))
