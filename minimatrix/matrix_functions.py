# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .errors import DimensionMismatchError, SingularMatrixError, UnsupportedDimensionError
from .matrix import Matrix
from .utils import (
    MAX_DETERMINANT_SIZE,
    MAX_INVERSE_SIZE,
    check_index,
    field_dtype,
    one,
    zero,
)

logger = logging.getLogger(__name__)


def _minor_array(A: np.ndarray, row: int, col: int) -> np.ndarray:
    m, n = A.shape
    return A[np.arange(m) != row][:, np.arange(n) != col]


def _det2(A: np.ndarray):
    return A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0]


def _det3(A: np.ndarray):
    return (
        A[0, 0] * (A[1, 1] * A[2, 2] - A[1, 2] * A[2, 1])
        - A[0, 1] * (A[1, 0] * A[2, 2] - A[1, 2] * A[2, 0])
        + A[0, 2] * (A[1, 0] * A[2, 1] - A[1, 1] * A[2, 0])
    )


def _det4(A: np.ndarray):
    # cofactor expansion along row 0, signs + - + -
    total = zero(A.dtype)
    for j in range(4):
        total += (-1) ** j * A[0, j] * _det3(_minor_array(A, 0, j))
    return total


def minor(matrix: Matrix, row: int, col: int) -> Matrix:
    """
    The (M-1) by (N-1) matrix left after deleting `row` and `col`.
    Remaining entries keep their relative order.
    """
    if matrix.rows < 2 or matrix.cols < 2:
        raise DimensionMismatchError(
            "a minor needs at least two rows and two columns",
            expected="(>=2, >=2)",
            actual=matrix.shape,
        )
    row = check_index(row, matrix.rows, "row")
    col = check_index(col, matrix.cols, "column")
    return Matrix(_minor_array(matrix.to_numpy(), row, col))


def determinant(matrix: Matrix):
    """
    Determinant of a square matrix of order 1 to 4 from the closed-form
    expansions. The result has the dtype of the matrix, so integer input
    gives an exact integer.

    Raises
    ------
    DimensionMismatchError : if the matrix is not square
    UnsupportedDimensionError : if the order is larger than 4
    """
    matrix._require_square("determinant")
    n = matrix.rows
    A = matrix.to_numpy()
    if n == 1:
        return A[0, 0]
    if n == 2:
        return _det2(A)
    if n == 3:
        return _det3(A)
    if n == 4:
        return _det4(A)
    raise UnsupportedDimensionError("determinant", n, MAX_DETERMINANT_SIZE)


def cofactor(matrix: Matrix, row: int, col: int):
    """(-1)^(row+col) times the determinant of the (row, col) minor."""
    matrix._require_square("cofactor")
    if matrix.rows == 1:
        check_index(row, 1, "row")
        check_index(col, 1, "column")
        # the empty minor has determinant 1
        return one(matrix.dtype)
    return (-1) ** (row + col) * determinant(minor(matrix, row, col))


def _check_inverse_size(matrix: Matrix, operation: str):
    matrix._require_square(operation)
    if matrix.rows > MAX_INVERSE_SIZE:
        logger.debug(f"{operation} rejected for a {matrix.rows}x{matrix.rows} matrix")
        raise UnsupportedDimensionError(operation, matrix.rows, MAX_INVERSE_SIZE)


def adjugate(matrix: Matrix) -> Matrix:
    """
    Adjugate (classical adjoint) of a square matrix of order 1 to 3,
    the transpose of its cofactor matrix. Defined for singular
    matrices too; the dtype of the input is kept.
    """
    _check_inverse_size(matrix, "adjugate")
    n = matrix.rows
    C = np.empty((n, n), dtype=matrix.dtype)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor(matrix, i, j)
    return Matrix(C.T)


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse of a square matrix of order 1 to 3, built from the cofactor
    matrix divided by the determinant and then transposed.

    A matrix is singular when its determinant is exactly zero; no
    tolerance is applied.

    Raises
    ------
    DimensionMismatchError : if the matrix is not square
    UnsupportedDimensionError : if the order is larger than 3
    SingularMatrixError : if the determinant is zero
    """
    _check_inverse_size(matrix, "inverse")
    d = determinant(matrix)
    if d == 0:
        logger.debug(f"inverse rejected, determinant of {matrix.shape} matrix is 0")
        raise SingularMatrixError("Matrix is singular and has no inverse", determinant=d)

    n = matrix.rows
    inv = np.empty((n, n), dtype=field_dtype(matrix.dtype))
    for i in range(n):
        for j in range(n):
            inv[i, j] = cofactor(matrix, i, j) / d
    return Matrix(inv.T)
