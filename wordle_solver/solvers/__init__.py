from __future__ import annotations
from typing import List
from .base import BaseSelector, REGISTRY, register

from . import random_consistent  # noqa: F401
from . import avoid_doubles  # noqa: F401
from .avoid_doubles import has_double_letter


def create_selector(selector_id: str, *, seed: int | None = None) -> BaseSelector:
    """
    Factory: instantiate a registered selector by id, optionally seeded.
    """
    try:
        cls = REGISTRY[selector_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown selector id: {selector_id}. Available: {sorted(REGISTRY.keys())}") from e
    selector = cls()
    selector.reset(seed=seed)
    return selector


def get_selector_ids() -> List[str]:
    """
    Return all registered selector ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseSelector", "REGISTRY", "register", "create_selector", "get_selector_ids",
           "has_double_letter"]
