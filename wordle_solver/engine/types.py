"""
Shared data types: per-position Correctness and the Guess record.

A Guess is one turn's evidence: the word that was played and the
Correctness of each of its positions. Both are immutable once created.

Rendering conventions:
  - pattern()   : 'G' correct, 'Y' misplaced, '-' absent   (e.g. "G-GGG")
  - formatted() : green / yellow / white squares            (for the console)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .errors import InvalidLength

GREEN_SQUARE = "\U0001F7E9"
YELLOW_SQUARE = "\U0001F7E8"
WHITE_SQUARE = "⬜"


class Correctness(Enum):
    CORRECT = "G"
    MISPLACED_LETTER = "Y"
    ABSENT = "-"

    @property
    def code(self) -> str:
        return self.value

    @property
    def square(self) -> str:
        if self is Correctness.CORRECT:
            return GREEN_SQUARE
        if self is Correctness.MISPLACED_LETTER:
            return YELLOW_SQUARE
        return WHITE_SQUARE

    @classmethod
    def from_code(cls, ch: str) -> "Correctness":
        """'G' / 'Y' / '-' -> member. Raises ValueError on anything else."""
        return cls(ch)


Result = Tuple[Correctness, ...]


def parse_pattern(pattern: str) -> Result:
    """Turn a "G-Y--" style string back into a Correctness tuple."""
    return tuple(Correctness.from_code(ch) for ch in pattern)


def render_pattern(result: Iterable[Correctness]) -> str:
    return "".join(r.code for r in result)


def render_squares(result: Iterable[Correctness]) -> str:
    return "".join(r.square for r in result)


@dataclass(frozen=True)
class Guess:
    """A played word and its per-position Correctness."""
    word: str
    result: Result

    def __post_init__(self):
        # Accept any iterable for `result` but store a tuple
        object.__setattr__(self, "result", tuple(self.result))
        if len(self.result) != len(self.word):
            raise InvalidLength(len(self.word), len(self.result), what="result")

    def is_solved(self) -> bool:
        return is_solved(self)

    def pattern(self) -> str:
        return render_pattern(self.result)

    def formatted(self) -> str:
        return render_squares(self.result)


def is_solved(guess: Guess) -> bool:
    """True iff every position of `guess` is CORRECT."""
    return all(r is Correctness.CORRECT for r in guess.result)
