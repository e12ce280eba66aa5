"""
Edit distance module for card sorts.

Card sorts are compared by the number of single card moves needed to turn one
into the other. Moves are counted through an assignment problem between the
groups of both sorts, solved with the Hungarian algorithm.
"""

from .assignment import max_weight_matching, min_weight_matching
from .sorts import (
    distance,
    largest_group,
    max_distance,
    norm_distance,
    num_cards,
    overlap_matrix,
)

__all__ = [
    # Assignment problem
    "max_weight_matching",
    "min_weight_matching",
    # Distance functions
    "distance",
    "max_distance",
    "norm_distance",
    # Utilities
    "num_cards",
    "largest_group",
    "overlap_matrix",
]
