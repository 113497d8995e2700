# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for minimatrix.

Every data-dependent failure of a container or decomposition derives from
MiniMatrixError, so callers can branch on "not invertible" or "too large"
without catching unrelated errors. Out-of-range element access stays a
plain IndexError.
"""

from typing import Optional


class MiniMatrixError(Exception):
    """Base exception for all minimatrix errors."""


class DimensionMismatchError(MiniMatrixError, ValueError):
    """
    Shapes are incompatible with the requested operation.

    Raised for non-square input to trace/determinant/inverse, operands of
    different shapes in arithmetic, and ragged construction data.

    Attributes:
        expected: the shape or size the operation needed, if known
        actual: the shape or size it received, if known
    """

    def __init__(self, message: str, expected=None, actual=None):
        if expected is not None or actual is not None:
            message = f"{message} (expected {expected}, got {actual})"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class UnsupportedDimensionError(MiniMatrixError, ValueError):
    """
    The matrix is larger than the closed-form formulas cover.

    Attributes:
        size: order of the square matrix that was passed
        max_size: largest order the operation supports
    """

    def __init__(self, operation: str, size: int, max_size: int):
        super().__init__(
            f"{operation} is not implemented for matrices larger than "
            f"{max_size}x{max_size} (got {size}x{size})"
        )
        self.size = size
        self.max_size = max_size


class SingularMatrixError(MiniMatrixError, ArithmeticError):
    """
    The matrix has a zero determinant and therefore no inverse.

    Attributes:
        determinant: the determinant that was found to be zero
    """

    def __init__(self, message: str, determinant: Optional[object] = None):
        super().__init__(message)
        self.determinant = determinant
