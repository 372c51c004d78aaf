"""
Double-letter avoiding selector (default).

Strategy:
  - Sample a word uniformly from the candidate dictionary.
  - Small dictionaries (fewer than SMALL_DICTIONARY_THRESHOLD words): take it.
  - Otherwise throw away samples with a repeated letter ("sleet", "hello")
    and draw again, at most MAX_DOUBLE_LETTER_REJECTIONS times; the draw
    after the last rejection is taken whatever it looks like.

Why:
  - Early on, repeated letters test fewer distinct letters per guess, and
    naive scoring says little about how many copies the target holds.

Not an entropy search; no optimality claim.
"""

from __future__ import annotations

from typing import Sequence

from wordle_solver.config import MAX_DOUBLE_LETTER_REJECTIONS, SMALL_DICTIONARY_THRESHOLD
from .base import BaseSelector, register


def has_double_letter(word: str) -> bool:
    """True if any letter occurs more than once in `word`."""
    return len(set(word)) != len(word)


@register
class DoubleLetterAvoidingSelector(BaseSelector):
    id = "avoid_doubles"
    name = "Random, avoiding double letters"
    version = "1.0.0"

    small_threshold = SMALL_DICTIONARY_THRESHOLD
    max_rejections = MAX_DOUBLE_LETTER_REJECTIONS

    def _choose(self, dictionary: Sequence[str]) -> str:
        choice = self._sample(dictionary)
        if len(dictionary) < self.small_threshold:
            return choice

        rejections = 0
        while has_double_letter(choice) and rejections < self.max_rejections:
            rejections += 1
            choice = self._sample(dictionary)
        return choice
