"""
Orthogonality of a collection of card sorts.

The weight of a minimum spanning tree over the complete graph of sorts,
weighted by edit distance, divided by the number of sorts. The more the sorts
disagree, the higher the orthogonality.
"""

import logging
from collections.abc import Hashable, Sequence
from itertools import combinations
from typing import TypeVar

from edit import distance as edit_distance
from localtypes import CardSort, Distance
from utils.graph import min_spanning_tree

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def orthogonality(
    sorts: Sequence[CardSort[T]],
    *,
    distance: Distance[T] = edit_distance,
) -> float:
    """
    Mean weight per sort of a minimum spanning tree of the sorts.

    Sorts are anonymous vertices 0..n-1. Collections of fewer than two sorts
    have an empty tree and an orthogonality of 0.
    """
    n = len(sorts)
    if n < 2:
        return 0.0

    vertices = range(n)
    weights = {(i, j): distance(sorts[i], sorts[j]) for i, j in combinations(vertices, 2)}
    edges = sorted(weights, key=weights.__getitem__)

    tree = min_spanning_tree(vertices, edges)
    total = sum(weights[edge] for edge in tree)
    logger.debug(f"Spanning tree of {n} sorts weighs {total}")

    return total / n
