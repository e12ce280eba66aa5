"""
Assignment problem solved with the Hungarian algorithm.

Both variants accept a rectangular matrix of non-negative weights and pair each
row with at most one column (and vice versa). With an m x n matrix exactly
min(m, n) pairs are formed, the remaining rows or columns contribute zero.
"""

from collections.abc import Sequence

import numpy as np
from scipy.optimize import linear_sum_assignment

type Weights = Sequence[Sequence[int | float]] | np.ndarray


def _as_matrix(weights: Weights) -> np.ndarray:
    matrix = np.asarray(weights)
    if matrix.size == 0:
        return matrix.reshape((0, 0))
    if matrix.ndim != 2:
        raise ValueError(f"Expected a 2-dimensional weight matrix, got {matrix.ndim}")
    if (matrix < 0).any():
        raise ValueError("Assignment weights must be non-negative")
    return matrix


def _matching_weight(weights: Weights, maximize: bool) -> int | float:
    matrix = _as_matrix(weights)
    if matrix.size == 0:
        return 0

    row_ind, col_ind = linear_sum_assignment(matrix, maximize=maximize)
    total = matrix[row_ind, col_ind].sum()

    if np.issubdtype(matrix.dtype, np.integer):
        return int(total)
    return float(total)


def max_weight_matching(weights: Weights) -> int | float:
    """
    Greatest total weight achievable by a one-to-one row/column matching.

    Args:
        weights: m x n matrix of non-negative weights.

    Returns:
        The maximum total weight, 0 for an empty matrix. Integer matrices
        give an int.
    """
    return _matching_weight(weights, maximize=True)


def min_weight_matching(weights: Weights) -> int | float:
    """Least total weight of a matching pairing min(m, n) rows and columns."""
    return _matching_weight(weights, maximize=False)
