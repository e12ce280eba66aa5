"""
Edit distance between card sorts.

The distance between two sorts is the minimum number of cards that have to be
moved from one group to another to turn the first sort into the second. It is
obtained from a maximum weight matching between the groups of both sorts,
weighted by the number of cards they share. Group order and empty groups are
ignored.

Reference: Deibel, Anderson & Anderson (2005), "Using edit distance to analyze
card sorts", Expert Systems 22(3).
"""

import logging
from collections.abc import Hashable
from typing import TypeVar

from localtypes import CardSort

from .assignment import max_weight_matching, min_weight_matching

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def num_cards(sort: CardSort[T]) -> int:
    """Total number of cards placed in the sort."""
    return sum(len(group) for group in sort)


def largest_group(sort: CardSort[T]) -> int:
    """Size of the largest group of the sort, 0 if it holds no card."""
    return max((len(group) for group in sort), default=0)


def overlap_matrix(sort1: CardSort[T], sort2: CardSort[T]) -> list[list[int]]:
    """
    Number of shared cards between every pair of non-empty groups.

    Row i is the i-th non-empty group of sort1, column j the j-th non-empty
    group of sort2.
    """
    groups1 = [group for group in sort1 if group]
    groups2 = [group for group in sort2 if group]
    return [[len(g1 & g2) for g2 in groups2] for g1 in groups1]


def distance(sort1: CardSort[T], sort2: CardSort[T]) -> int:
    """
    Minimum number of single card moves turning sort1 into sort2.

    Both sorts are expected to partition the same cards; this is not checked.

    Args:
        sort1: Source card sort.
        sort2: Target card sort.

    Returns:
        Number of cards of sort1 minus the largest total overlap achievable
        by pairing groups of both sorts one-to-one.
    """
    return num_cards(sort1) - max_weight_matching(overlap_matrix(sort1, sort2))


def _balanced_cost_row(size: int, num_groups: int) -> list[int]:
    """
    Cards of a group of the given size left out when it is matched against
    one of num_groups balanced target groups.

    The group is dealt evenly across the target groups, so the first
    size % num_groups targets receive one card more than the others.
    """
    kept = size - size // num_groups
    remainder = size % num_groups
    return [kept - 1] * remainder + [kept] * (num_groups - remainder)


def max_distance(sort: CardSort[T], num_groups: int | None = None) -> int:
    """
    Upper bound of the distance between sort and any sort of at most
    num_groups groups.

    The bound pairs the groups of sort against an idealised target whose
    num_groups groups each receive an even share of every group of sort.

    Args:
        sort: Card sort to bound.
        num_groups: Number of groups of the other sorts. Defaults to the size
            of the largest group of sort.

    Returns:
        The minimum total cost of the pairing, 0 for a sort without cards.

    Raises:
        ValueError: If num_groups is not positive.
    """
    if num_groups is None:
        num_groups = largest_group(sort)
        if num_groups == 0:
            return 0
    if num_groups <= 0:
        raise ValueError(f"num_groups must be positive, got {num_groups}")

    weights = [_balanced_cost_row(len(group), num_groups) for group in sort if group]
    return min_weight_matching(weights)


def norm_distance(
    sort1: CardSort[T], sort2: CardSort[T], num_groups: int | None = None
) -> float:
    """
    Distance between sort1 and sort2 divided by the maximum distance of sort1.

    The maximum distance is a heuristic bound, so the ratio is not guaranteed
    to stay within [0, 1]; it is returned as is.

    Args:
        sort1: Source card sort.
        sort2: Target card sort.
        num_groups: Forwarded to max_distance. Defaults to the size of the
            largest group across both sorts.

    Returns:
        The normalised distance. When the maximum distance is 0, 0.0 for
        identical sorts and 1.0 otherwise.
    """
    if num_groups is None:
        num_groups = max(largest_group(sort1), largest_group(sort2))
        if num_groups == 0:
            return 0.0

    raw = distance(sort1, sort2)
    bound = max_distance(sort1, num_groups)
    if bound == 0:
        if raw == 0:
            return 0.0
        logger.warning(
            f"Maximum distance is 0 but sorts are {raw} moves apart, "
            "they do not hold the same cards"
        )
        return 1.0
    return raw / bound
