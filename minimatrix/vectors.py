# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Fixed-length vectors and the operations defined on them
"""

import math
from typing import Sequence

import numpy as np

from .errors import DimensionMismatchError
from .utils import as_scalar_array, check_index, format_scalar, scalar_dtype


class Vector:
    """
    An ordered sequence of N scalars. N is fixed when the vector is built.

    The elements are copied into a private 1-D ndarray, so a Vector never
    shares storage with the data it was built from.
    """

    __hash__ = None
    # numpy operands defer to the Vector operators instead of broadcasting
    __array_ufunc__ = None

    def __init__(self, data, dtype=None):
        self._store = as_scalar_array(data, ndim=1, dtype=dtype)

    @classmethod
    def zero(cls, n: int, dtype=float) -> "Vector":
        return cls(np.zeros(n, dtype=scalar_dtype(dtype)))

    @property
    def dtype(self) -> np.dtype:
        return self._store.dtype

    @property
    def size(self) -> int:
        return self._store.shape[0]

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, i):
        return self._store[check_index(i, self.size)]

    def __setitem__(self, i, value):
        self._store[check_index(i, self.size)] = value

    def __iter__(self):
        return iter(self._store.tolist())

    def __array__(self, dtype=None, copy=None):
        return np.array(self._store, dtype=dtype, copy=True)

    def to_numpy(self) -> np.ndarray:
        return self._store.copy()

    def copy(self) -> "Vector":
        return Vector(self._store)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._store.tolist()})"

    def __str__(self) -> str:
        return "[" + ", ".join(format_scalar(x) for x in self._store) + "]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._store, other._store))

    def allclose(self, other: "Vector", atol: float = 1e-10) -> bool:
        return self.size == other.size and bool(
            np.allclose(self._store, other._store, atol=atol)
        )

    def _check_same_size(self, other: "Vector"):
        if not isinstance(other, Vector):
            raise TypeError(f"expected a Vector, got {type(other).__name__}")
        if other.size != self.size:
            raise DimensionMismatchError(
                "vector sizes differ", expected=self.size, actual=other.size
            )

    # ---------------------------------------------------------------------
    # In-place arithmetic
    # ---------------------------------------------------------------------
    def add(self, other: "Vector") -> None:
        self._check_same_size(other)
        np.add(self._store, other._store, out=self._store)

    def sub(self, other: "Vector") -> None:
        self._check_same_size(other)
        np.subtract(self._store, other._store, out=self._store)

    def scl(self, scalar) -> None:
        np.multiply(self._store, scalar, out=self._store)

    def __iadd__(self, other: "Vector") -> "Vector":
        self.add(other)
        return self

    def __isub__(self, other: "Vector") -> "Vector":
        self.sub(other)
        return self

    def __imul__(self, scalar) -> "Vector":
        if np.ndim(scalar) != 0:
            return NotImplemented
        self.scl(scalar)
        return self

    # ---------------------------------------------------------------------
    # Operator forms, each returning a new vector
    # ---------------------------------------------------------------------
    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(self._store + other._store)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector(self._store - other._store)

    def __mul__(self, scalar) -> "Vector":
        if np.ndim(scalar) != 0:
            return NotImplemented
        return Vector(self._store * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector(-self._store)

    def dot(self, other: "Vector"):
        """
        Implements the scalar (dot) product between two vectors.
        """
        self._check_same_size(other)
        return np.dot(self._store, other._store)

    def norm_1(self) -> float:
        """Manhattan norm, the sum of absolute values."""
        return float(np.sum(np.abs(self._store)))

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(float(np.sum(np.abs(self._store) ** 2)))

    def norm_inf(self) -> float:
        """Supremum norm, the largest absolute value."""
        return float(np.max(np.abs(self._store)))


def dot_product(u: Vector, v: Vector):
    return u.dot(v)


def linear_combination(vectors: Sequence[Vector], scalars: Sequence) -> Vector:
    """
    Sum of scalar multiples of vectors, sum(scalars[k] * vectors[k]).

    All vectors must have the same size, and there must be exactly one
    scalar per vector.
    """
    if len(vectors) != len(scalars):
        raise DimensionMismatchError(
            "the number of vectors and scalars must be the same",
            expected=len(vectors),
            actual=len(scalars),
        )
    if not vectors:
        raise ValueError("The number of vectors must be greater than 0")

    dtype = np.result_type(*(v.dtype for v in vectors), *scalars)
    result = Vector.zero(vectors[0].size, dtype=dtype)
    for vector, scalar in zip(vectors, scalars):
        result._check_same_size(vector)
        result.add(vector * scalar)
    return result


def angle_cos(u: Vector, v: Vector) -> float:
    """
    cos(theta) = (u . v) / (||u|| ||v||)
    """
    u_len = u.norm()
    v_len = v.norm()
    if u_len == 0 or v_len == 0:
        raise ValueError("Angle undefined for zero-length vector")
    return float(np.real(u.dot(v))) / (u_len * v_len)


def angle(u: Vector, v: Vector) -> float:
    cos_theta = angle_cos(u, v)
    # clamp angle radians between [-1, 1]
    cos_theta = max(-1.0, min(1.0, cos_theta))
    return math.acos(cos_theta)


def cross_product(u: Vector, v: Vector) -> Vector:
    """
    Implements classical cross product u x v in R^3
    Defines a vector orthogonal to u and v with magnitude
    equal to the parallelogram area.
    """
    if u.size != 3 or v.size != 3:
        raise DimensionMismatchError(
            "cross product is only defined for 3D vectors",
            expected=(3, 3),
            actual=(u.size, v.size),
        )
    return Vector(
        [
            u[1] * v[2] - u[2] * v[1],
            u[2] * v[0] - u[0] * v[2],
            u[0] * v[1] - u[1] * v[0],
        ]
    )
