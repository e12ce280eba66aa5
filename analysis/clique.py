"""
Heuristic d-cliques of card sorts.

A d-clique is grown around a probe sort: sorts equivalent to the probe are
taken first, then sorts within d of the probe are added one at a time, each
added sort pruning the candidates further than d away from it.

Which candidate gets added is decided by a strategy, and ties are broken by a
selector. The result is not guaranteed to be the largest d-clique.

Reference: Deibel, Anderson & Anderson (2005), "Using edit distance to analyze
card sorts", Expert Systems 22(3).
"""

import logging
from collections.abc import Callable, Hashable, Mapping
from typing import TypeVar

from edit import distance as edit_distance
from localtypes import CardSort, Distance, SortCollection
from utils.algorithms.selectors import RandomSelector, Selector

from .neighbourhood import neighbourhood

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T", bound=Hashable)

type Strategy[K, T] = Callable[[int, Mapping[K, CardSort[T]], Selector[K]], K]


def random_strategy(
    d: int, candidates: Mapping[K, CardSort[T]], selector: Selector[K]
) -> K:
    """Let the selector pick any candidate."""
    return selector.select(list(candidates))


def greedy_strategy(
    d: int,
    candidates: Mapping[K, CardSort[T]],
    selector: Selector[K],
    *,
    distance: Distance[T] = edit_distance,
) -> K:
    """
    Pick the candidate whose neighbourhood among the candidates is largest.

    Adding that candidate removes the fewest other candidates from the pool.
    Candidates sharing the largest neighbourhood are handed to the selector.
    """
    best_size = 0
    best_keys: list[K] = []

    for key, sort in candidates.items():
        size = len(neighbourhood(d, sort, candidates, distance=distance))
        if size > best_size:
            best_size = size
            best_keys = [key]
        elif size == best_size:
            best_keys.append(key)

    return selector.select(best_keys)


def clique(
    d: int,
    probe: CardSort[T],
    sorts: SortCollection[K, T],
    *,
    strategy: Strategy[K, T] = greedy_strategy,
    selector: Selector[K] | None = None,
    distance: Distance[T] = edit_distance,
) -> set[K]:
    """
    Grow a d-clique of sorts around probe.

    Args:
        d: Maximum distance between a sort and each sort added after it.
        probe: Sort the clique is grown around, not necessarily in sorts.
        sorts: Sort collection to draw members from.
        strategy: Chooses the next member among the candidates. A strategy
            needing a custom distance should have it bound beforehand, e.g.
            with functools.partial.
        selector: Breaks ties, defaults to an unseeded RandomSelector.
        distance: Distance between sorts.

    Returns:
        Keys of the clique members.
    """
    if selector is None:
        selector = RandomSelector()

    members: set[K] = set()
    candidates: dict[K, CardSort[T]] = {}
    for key, sort in sorts.items():
        probe_distance = distance(probe, sort)
        if probe_distance == 0:
            members.add(key)
        elif probe_distance <= d:
            candidates[key] = sort

    logger.debug(
        f"Clique seeded with {len(members)} equivalent sorts, "
        f"{len(candidates)} candidates within {d}"
    )

    while candidates:
        selected = strategy(d, candidates, selector)
        members.add(selected)
        anchor = candidates[selected]
        candidates = {
            key: sort
            for key, sort in candidates.items()
            if key != selected and distance(anchor, sort) <= d
        }
        logger.debug(f"Added {selected!r}, {len(candidates)} candidates left")

    return members
