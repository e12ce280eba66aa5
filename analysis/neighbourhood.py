"""
Neighbourhood of a card sort: every sort of a collection lying within a given
edit distance of a probe sort.
"""

from collections.abc import Hashable
from typing import TypeVar

from edit import distance as edit_distance
from localtypes import CardSort, Distance, SortCollection

K = TypeVar("K", bound=Hashable)
T = TypeVar("T", bound=Hashable)


def neighbourhood(
    d: int,
    probe: CardSort[T],
    sorts: SortCollection[K, T],
    *,
    distance: Distance[T] = edit_distance,
) -> set[K]:
    """
    Keys of the sorts at most d moves away from probe.

    The probe does not have to belong to sorts. A neighbourhood of 0 holds
    exactly the sorts equivalent to the probe.
    """
    return {key for key, sort in sorts.items() if 0 <= distance(probe, sort) <= d}
