"""
Type definitions for card sort analysis.

This module contains the custom types used throughout the card sort library,
organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence, Set


# Card sorts
type Group[T] = Set[T]  # One category: a set of cards, possibly empty
type CardSort[T] = Sequence[Group[T]]  # Group order carries no meaning
type SortCollection[K, T] = Mapping[K, CardSort[T]]

# Distances between card sorts
type Distance[T] = Callable[[CardSort[T], CardSort[T]], int]

# Graphs
type Edge[V] = tuple[V, V]
