"""
Card sort analysis.

Functions:
    neighbourhood(d, probe, sorts) - Sorts within d moves of a probe
    clique(d, probe, sorts)        - Heuristic d-clique grown around a probe
    orthogonality(sorts)           - Spanning tree dissimilarity of a collection
"""

from .clique import Strategy, clique, greedy_strategy, random_strategy
from .neighbourhood import neighbourhood
from .orthogonality import orthogonality

__all__ = [
    "neighbourhood",
    "clique",
    "greedy_strategy",
    "random_strategy",
    "Strategy",
    "orthogonality",
]
