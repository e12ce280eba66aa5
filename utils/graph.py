"""
Functions related to graphs
"""

import logging
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

from localtypes import Edge
from utils.union_find import DisjointSet

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


def min_spanning_tree(vertices: Iterable[V], edges: Sequence[Edge[V]]) -> list[Edge[V]]:
    """
    Kruskal's algorithm over edges already sorted by increasing weight.

    Edges are never reordered here: sorting them, and breaking ties between
    equal weights, is up to the caller.

    Args:
        vertices: Vertices of the graph.
        edges: (u, v) pairs sorted by increasing weight.

    Returns:
        Accepted edges in acceptance order. They form a minimum spanning
        forest when the graph is disconnected.
    """
    forest = DisjointSet(vertices)
    tree: list[Edge[V]] = []

    for u, v in edges:
        if forest.find(u) != forest.find(v):
            tree.append((u, v))
            forest.merge(u, v)

    logger.debug(f"Spanning tree: {len(tree)} edges accepted out of {len(edges)}")
    return tree
