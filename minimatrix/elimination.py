# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import List, Optional, Tuple

import numpy as np

from .matrix import Matrix
from .utils import field_dtype

logger = logging.getLogger(__name__)


def _first_nonzero_row(R: np.ndarray, start: int, col: int) -> Optional[int]:
    """Index of the first row at or below `start` whose entry in `col` is not exactly zero."""
    nonzero = np.flatnonzero(R[start:, col] != 0)
    if nonzero.size == 0:
        return None
    return start + int(nonzero[0])


def reduce_rows(A: np.ndarray) -> Tuple[np.ndarray, List[int]]:
    """
    Gauss-Jordan reduction of an m by n array to reduced row-echelon form.

    Parameters
    ----------
    A : np.ndarray               (m, n)
        Input array, left untouched.

    Returns
    -------
    R      : np.ndarray          (m, n)
        Reduced row-echelon form of A in the field dtype of A.
    pivots : list[int]
        Column indices where pivots were placed; len = number of nonzero rows.
    """
    R = A.astype(field_dtype(A.dtype), copy=True)
    m, n = R.shape
    pivots: List[int] = []

    row = 0
    col = 0
    while row < m and col < n:
        # The first nonzero entry at or below `row` is taken as the pivot,
        # there is no search for the largest magnitude.
        pivot_row = _first_nonzero_row(R, row, col)
        if pivot_row is None:
            # column is zero from here down, try the next one with the same row
            logger.debug(f"column {col} has no pivot at or below row {row}")
            col += 1
            continue

        if pivot_row != row:
            logger.debug(f"swapping rows {row} and {pivot_row} for pivot column {col}")
            R[[row, pivot_row]] = R[[pivot_row, row]]

        # Scale the pivot row so the pivot becomes 1
        divisor = R[row, col]
        if divisor != 0:
            R[row] /= divisor
            # complex division does not always give exactly 1
            R[row, col] = 1

        # Eliminate the pivot column in every other row
        factors = R[:, col].copy()
        factors[row] = 0
        R -= factors[:, None] * R[row]
        R[np.arange(m) != row, col] = 0

        pivots.append(col)
        row += 1
        col += 1

    return R, pivots


def row_echelon(matrix: Matrix) -> Matrix:
    """
    Return the reduced row-echelon form of `matrix` as a new Matrix of the
    same shape. Works for any shape; the input is not modified.
    """
    R, _pivots = reduce_rows(matrix.to_numpy())
    return Matrix(R)


def rank(matrix: Matrix) -> int:
    """Matrix rank is the number of rows that are not all zero after reduction"""
    R, _pivots = reduce_rows(matrix.to_numpy())
    zero_rows = int(np.count_nonzero(np.all(R == 0, axis=1)))
    return matrix.rows - zero_rows
