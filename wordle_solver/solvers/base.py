from __future__ import annotations
import random
from typing import Dict, Sequence, Type

from wordle_solver.engine.errors import EmptyCandidateSet

# ---- Global selector registry ----
REGISTRY: Dict[str, Type["BaseSelector"]] = {}


def register(cls: Type["BaseSelector"]) -> Type["BaseSelector"]:
    """
    Decorator: @register on a selector class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate selector id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that selectors inherit ----
class BaseSelector:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()

    def reset(self, *, seed: int | None = None) -> None:
        if seed is not None:
            self.rng.seed(seed)

    def _sample(self, dictionary: Sequence[str]) -> str:
        return dictionary[self.rng.randrange(len(dictionary))]

    def choose_next(self, dictionary: Sequence[str]) -> str:
        """
        Pick the next word to guess from a non-empty candidate dictionary.
        Raises EmptyCandidateSet when there is nothing to pick.
        """
        if not dictionary:
            raise EmptyCandidateSet()
        return self._choose(dictionary)

    def _choose(self, dictionary: Sequence[str]) -> str:
        raise NotImplementedError("Override in subclass")
