"""
Random Consistent selector.

Strategy:
  - Choose uniformly at random from the CURRENT candidate dictionary (words
    still consistent with all evidence so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSelector.rng).
  - Baseline to compare the double-letter heuristic against.
"""

from __future__ import annotations

from typing import Sequence
from .base import BaseSelector, register


@register
class RandomConsistentSelector(BaseSelector):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def _choose(self, dictionary: Sequence[str]) -> str:
        return self._sample(dictionary)
