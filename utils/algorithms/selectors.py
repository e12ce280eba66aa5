"""
Selectors choose one element out of a non-empty collection of candidates.

They break ties in clique strategies and drive the random strategy. Inject
MinSelector, MaxSelector or a seeded RandomSelector for reproducible results.
"""

from collections.abc import Callable, Hashable, Sequence
from typing import Any, Protocol, TypeVar

import numpy as np

K = TypeVar("K", bound=Hashable)


class Selector(Protocol[K]):
    def select(self, candidates: Sequence[K]) -> K: ...


def _check_candidates(candidates: Sequence) -> None:
    if not candidates:
        raise ValueError("Cannot select from an empty collection")


class RandomSelector(Selector[K]):
    """Uniform choice, reproducible when built with a seed."""

    def __init__(self, seed: int | np.random.Generator | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def select(self, candidates: Sequence[K]) -> K:
        _check_candidates(candidates)
        return candidates[int(self._rng.integers(len(candidates)))]


class MinSelector(Selector[K]):
    """Smallest candidate, optionally by key."""

    def __init__(self, key: Callable[[K], Any] | None = None) -> None:
        self.key = key

    def select(self, candidates: Sequence[K]) -> K:
        _check_candidates(candidates)
        return min(candidates, key=self.key)


class MaxSelector(Selector[K]):
    """Largest candidate, optionally by key."""

    def __init__(self, key: Callable[[K], Any] | None = None) -> None:
        self.key = key

    def select(self, candidates: Sequence[K]) -> K:
        _check_candidates(candidates)
        return max(candidates, key=self.key)
