"""
One play-through against a fixed target.

The Session owns the mutable state of a game: guess history, the
ConstraintSet built from it and the shrinking candidate dictionary. Nothing
here is global; drivers create a Session per game and drop it afterwards.
"""

from __future__ import annotations

from typing import Iterable, List

from wordle_solver.config import DEFAULT_MODE
from wordle_solver.engine import ConstraintSet, Guess, is_solved, score
from wordle_solver.engine.errors import InvalidLength
from wordle_solver.logging_utils import get_logger

log = get_logger(__name__)


class Session:
    def __init__(self, words: Iterable[str], target: str, *, mode: str = DEFAULT_MODE):
        self.target = target.strip().lower()
        self.mode = mode
        self.dictionary: List[str] = [w.strip().lower() for w in words]
        self.guesses: List[Guess] = []
        self.constraints = ConstraintSet(length=len(self.target))

    def __repr__(self):
        return (f"Session(target={self.target!r}, guesses={len(self.guesses)}, "
                f"candidates={len(self.dictionary)})")

    @property
    def candidate_count(self) -> int:
        return len(self.dictionary)

    @property
    def exhausted(self) -> bool:
        return not self.dictionary

    @property
    def last_guess(self) -> Guess | None:
        return self.guesses[-1] if self.guesses else None

    def guess(self, word: str) -> Guess:
        """Score `word` against the target, record it and return the Guess."""
        word = word.strip().lower()
        g = Guess(word, score(word, self.target, self.mode))
        self.record(g)
        return g

    def record(self, guess: Guess) -> None:
        """
        Add one turn's evidence, then filter the dictionary and drop the
        guessed word from it.

        The new constraints and dictionary are built on a copy and committed
        together with the history only once filtering succeeded, so an error
        here leaves all three as they were.
        """
        if len(guess.word) != len(self.target):
            raise InvalidLength(len(self.target), len(guess.word))
        if guess.word != guess.word.lower():
            guess = Guess(guess.word.lower(), guess.result)

        staged = self.constraints.copy()
        staged.absorb(guess, strict=self.mode == "strict")
        kept = staged.apply(self.dictionary)

        before = len(self.dictionary)
        self.guesses.append(guess)
        self.constraints = staged
        self.dictionary = [w for w in kept if w != guess.word]

        conflicts = staged.conflicts()
        if conflicts:
            log.warning("letters both excluded and required: %s", "".join(sorted(conflicts)))

        log.debug("guess %d: %s %s | candidates %d -> %d", len(self.guesses), guess.word,
                  guess.pattern(), before, len(self.dictionary))

    def is_solved(self) -> bool:
        """True iff the most recent guess was all CORRECT."""
        last = self.last_guess
        return last is not None and is_solved(last)
