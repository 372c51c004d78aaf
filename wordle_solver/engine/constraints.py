"""
Constraint accumulation and candidate filtering.

Evidence gathered from every Guess in a session is folded into a
ConstraintSet:

  - excluded : letters marked ABSENT
  - required : letters marked MISPLACED_LETTER (present, position unknown)
  - pinned   : position -> letter marked CORRECT there

The set only ever grows. `retain_consistent` keeps the words of a
dictionary that agree with all three parts at once.

Known latent inconsistency: nothing stops a letter from being both
excluded and required (e.g. guesses recorded by hand, or scored against
different targets). The filter applies exclusion and requirement
independently and does not try to reconcile them, so such a letter empties
the dictionary. `conflicts()` reports these letters so a caller can notice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Set

from wordle_solver.logging_utils import get_logger
from .errors import IndexOutOfRange, InvalidLength
from .types import Correctness, Guess

log = get_logger(__name__)


def check_pinned(pinned: Mapping[int, str], length: int) -> None:
    """Raise IndexOutOfRange if any pinned position falls outside `length`."""
    for pos in pinned:
        if pos < 0 or pos >= length:
            raise IndexOutOfRange(pos, length)


def is_consistent(
        word: str,
        excluded: Iterable[str],
        required: Iterable[str],
        pinned: Mapping[int, str],
) -> bool:
    """
    True iff `word` contains no excluded letter, every required letter
    (membership only) and the pinned letter at every pinned position.
    """
    check_pinned(pinned, len(word))

    for c in excluded:
        if c in word:
            return False

    for c in required:
        if c not in word:
            return False

    for pos, c in pinned.items():
        if word[pos] != c:
            return False

    return True


def retain_consistent(
        dictionary: Iterable[str],
        excluded: Iterable[str],
        required: Iterable[str],
        pinned: Mapping[int, str],
) -> List[str]:
    """
    Return the words of `dictionary` that pass `is_consistent`, order preserved.

    Running it again with the same constraints on its own output returns the
    same list.
    """
    # Materialize once; callers may hand us generators
    excluded = set(excluded)
    required = set(required)
    return [w for w in dictionary if is_consistent(w, excluded, required, pinned)]


@dataclass
class ConstraintSet:
    """Evidence accumulated over all guesses of one session."""
    excluded: Set[str] = field(default_factory=set)
    required: Set[str] = field(default_factory=set)
    pinned: Dict[int, str] = field(default_factory=dict)
    length: int | None = None

    def copy(self) -> "ConstraintSet":
        return ConstraintSet(set(self.excluded), set(self.required), dict(self.pinned), self.length)

    def absorb(self, guess: Guess, *, strict: bool = False) -> None:
        """
        Fold one Guess into the set.

        ABSENT letters go to `excluded`. With `strict=True` (evidence from
        strict scoring), an ABSENT mark on a letter the same guess also marks
        present only caps its count, so that letter is not excluded.

        The whole guess is checked before anything changes, so a guess of the
        wrong length leaves the set as it was.
        """
        n = len(guess.word)
        if self.length is None:
            self.length = n
        elif n != self.length:
            raise InvalidLength(self.length, n)
        check_pinned(self.pinned, n)

        present = set()
        if strict:
            present = {c for c, r in zip(guess.word, guess.result) if r is not Correctness.ABSENT}

        for i, (c, r) in enumerate(zip(guess.word, guess.result)):
            if r is Correctness.CORRECT:
                prev = self.pinned.setdefault(i, c)
                if prev != c:
                    # A position is never unpinned
                    log.warning("position %d already pinned to %r; ignoring %r", i, prev, c)
            elif r is Correctness.MISPLACED_LETTER:
                self.required.add(c)
            elif c not in present:
                self.excluded.add(c)

    def conflicts(self) -> Set[str]:
        """Letters that are both excluded and required (or pinned)."""
        return self.excluded & (self.required | set(self.pinned.values()))

    def apply(self, dictionary: Iterable[str]) -> List[str]:
        return retain_consistent(dictionary, self.excluded, self.required, self.pinned)
