# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Fixed-shape matrix container
"""

from typing import Optional, Tuple, Union

import numpy as np

from .errors import DimensionMismatchError
from .utils import as_scalar_array, check_index, format_scalar, scalar_dtype, scale_tol
from .vectors import Vector


class Matrix:
    """
    An M by N matrix of scalars. M and N are fixed once the matrix is built.

    Elements are read and written either by ``m[row, col]`` or by a single
    row-major linear index ``m[k]``. Decompositions return new matrices;
    only `add`, `sub` and `scl` (and the augmented operators) modify the
    receiver.

    Example
    -------
    >>> A = Matrix([[8, 5, -2], [4, 7, 20], [7, 6, 1]])
    >>> int(A.determinant())
    -174
    >>> print(Matrix([[1, 2], [2, 4]]).row_echelon())
    [1.0, 2.0]
    [0.0, 0.0]
    """

    __hash__ = None
    # numpy operands defer to the Matrix operators instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, data, dtype=None):
        self._store = as_scalar_array(data, ndim=2, dtype=dtype)

    @classmethod
    def zero(cls, m: int, n: int, dtype=float) -> "Matrix":
        return cls(np.zeros((m, n), dtype=scalar_dtype(dtype)))

    @classmethod
    def identity(cls, n: int, dtype=float) -> "Matrix":
        return cls(np.eye(n, dtype=scalar_dtype(dtype)))

    @property
    def dtype(self) -> np.dtype:
        return self._store.dtype

    @property
    def shape(self) -> Tuple[int, int]:
        return self._store.shape

    @property
    def rows(self) -> int:
        return self._store.shape[0]

    @property
    def cols(self) -> int:
        return self._store.shape[1]

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def _position(self, index) -> Tuple[int, int]:
        if isinstance(index, tuple):
            if len(index) != 2:
                raise IndexError(f"expected (row, col), got {index!r}")
            return (
                check_index(index[0], self.rows, "row"),
                check_index(index[1], self.cols, "column"),
            )
        k = check_index(index, self.rows * self.cols)
        return divmod(k, self.cols)

    def __getitem__(self, index):
        return self._store[self._position(index)]

    def __setitem__(self, index, value):
        self._store[self._position(index)] = value

    def __array__(self, dtype=None, copy=None):
        return np.array(self._store, dtype=dtype, copy=True)

    def to_numpy(self) -> np.ndarray:
        return self._store.copy()

    def tolist(self) -> list:
        return self._store.tolist()

    def copy(self) -> "Matrix":
        return Matrix(self._store)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._store.tolist()})"

    def __str__(self) -> str:
        return "\n".join(
            "[" + ", ".join(format_scalar(x) for x in row) + "]" for row in self._store
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._store, other._store)
        )

    def allclose(
        self, other: "Matrix", rtol: float = 1e-8, atol: Optional[float] = None
    ) -> bool:
        """Element-wise comparison for floating results, tolerance scaled to self."""
        if self.shape != other.shape:
            return False
        if atol is None:
            atol = scale_tol(self._store)
        return bool(np.allclose(self._store, other._store, rtol=rtol, atol=atol))

    def _check_same_shape(self, other: "Matrix"):
        if not isinstance(other, Matrix):
            raise TypeError(f"expected a Matrix, got {type(other).__name__}")
        if other.shape != self.shape:
            raise DimensionMismatchError(
                "matrix shapes differ", expected=self.shape, actual=other.shape
            )

    def _require_square(self, operation: str):
        if not self.is_square:
            raise DimensionMismatchError(
                f"Matrix must be square to calculate {operation}",
                expected="square",
                actual=self.shape,
            )

    # ---------------------------------------------------------------------
    # In-place arithmetic
    # ---------------------------------------------------------------------
    def add(self, other: "Matrix") -> None:
        self._check_same_shape(other)
        np.add(self._store, other._store, out=self._store)

    def sub(self, other: "Matrix") -> None:
        self._check_same_shape(other)
        np.subtract(self._store, other._store, out=self._store)

    def scl(self, scalar) -> None:
        np.multiply(self._store, scalar, out=self._store)

    def __iadd__(self, other: "Matrix") -> "Matrix":
        self.add(other)
        return self

    def __isub__(self, other: "Matrix") -> "Matrix":
        self.sub(other)
        return self

    def __imul__(self, scalar) -> "Matrix":
        if isinstance(scalar, (Matrix, Vector)):
            return NotImplemented
        self.scl(scalar)
        return self

    # ---------------------------------------------------------------------
    # Operator forms, each returning a new matrix
    # ---------------------------------------------------------------------
    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(self._store + other._store)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(self._store - other._store)

    def __mul__(self, scalar) -> "Matrix":
        if isinstance(scalar, (Matrix, Vector)):
            return NotImplemented
        return Matrix(self._store * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Matrix":
        return Matrix(-self._store)

    def __matmul__(self, other: Union["Matrix", Vector]):
        if isinstance(other, Matrix):
            return self.mul_mat(other)
        if isinstance(other, Vector):
            return self.mul_vec(other)
        return NotImplemented

    def mul_vec(self, vec: Vector) -> Vector:
        """(M, N) matrix times an N-vector gives an M-vector."""
        if vec.size != self.cols:
            raise DimensionMismatchError(
                "vector size must equal the number of columns",
                expected=self.cols,
                actual=vec.size,
            )
        return Vector(self._store @ vec.to_numpy())

    def mul_mat(self, mat: "Matrix") -> "Matrix":
        """(M, N) times (N, P) gives (M, P)."""
        if mat.rows != self.cols:
            raise DimensionMismatchError(
                "inner dimensions must agree",
                expected=self.cols,
                actual=mat.rows,
            )
        return Matrix(self._store @ mat._store)

    def transpose(self) -> "Matrix":
        return Matrix(self._store.T)

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def trace(self):
        """Sum of the diagonal, square matrices only."""
        self._require_square("trace")
        return np.trace(self._store)

    # ---------------------------------------------------------------------
    # Decompositions, implemented in elimination.py / matrix_functions.py
    # ---------------------------------------------------------------------
    def row_echelon(self) -> "Matrix":
        from .elimination import row_echelon

        return row_echelon(self)

    def rank(self) -> int:
        from .elimination import rank

        return rank(self)

    def minor(self, row: int, col: int) -> "Matrix":
        from .matrix_functions import minor

        return minor(self, row, col)

    def determinant(self):
        from .matrix_functions import determinant

        return determinant(self)

    def inverse(self) -> "Matrix":
        from .matrix_functions import inverse

        return inverse(self)

    def adjugate(self) -> "Matrix":
        from .matrix_functions import adjugate

        return adjugate(self)
