# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Scalar field contract shared by the vector and matrix containers.

A scalar dtype must support ``+ - * / ==``, carry an additive and a
multiplicative identity, and allow ``abs`` for the norms. Signed
integers, floats and complex numbers qualify; booleans, unsigned
integers and object arrays do not.
"""

import numpy as np

from .errors import DimensionMismatchError

EPS: float = 1e-12

MAX_DETERMINANT_SIZE: int = 4
MAX_INVERSE_SIZE: int = 3

_FIELD_KINDS = ("i", "f", "c")


def scalar_dtype(dtype) -> np.dtype:
    """Return `dtype` as a np.dtype, raising TypeError if it is not a scalar field."""
    dtype = np.dtype(dtype)
    if dtype.kind not in _FIELD_KINDS:
        raise TypeError(
            f"unsupported scalar dtype {dtype}; expected a signed integer, "
            "floating or complex dtype"
        )
    return dtype


def field_dtype(dtype) -> np.dtype:
    """
    The dtype used where an operation divides.

    Integers are promoted to float64, floating and complex dtypes are kept.
    """
    dtype = scalar_dtype(dtype)
    if dtype.kind == "i":
        return np.dtype(np.float64)
    return dtype


def zero(dtype):
    """Additive identity of `dtype`."""
    return scalar_dtype(dtype).type(0)


def one(dtype):
    """Multiplicative identity of `dtype`."""
    return scalar_dtype(dtype).type(1)


def as_scalar_array(data, ndim: int, dtype=None) -> np.ndarray:
    """
    Copy `data` into a fresh ndarray with `ndim` dimensions and a scalar
    field dtype. Ragged nested sequences raise DimensionMismatchError.
    """
    try:
        arr = np.array(data, dtype=dtype, copy=True)
    except ValueError as e:
        raise DimensionMismatchError(f"inhomogeneous input: {e}") from e
    if arr.ndim != ndim:
        raise DimensionMismatchError(
            f"expected {ndim}-dimensional data",
            expected=ndim,
            actual=arr.ndim,
        )
    if arr.size == 0:
        raise DimensionMismatchError(f"empty container of shape {arr.shape}")
    scalar_dtype(arr.dtype)
    return arr


def check_index(index, size: int, axis: str = "index") -> int:
    """Bounds-check a non-negative integer index against `size`."""
    if isinstance(index, (bool, np.bool_)) or not isinstance(
        index, (int, np.integer)
    ):
        raise TypeError(f"{axis} must be an integer, got {type(index).__name__}")
    if not 0 <= index < size:
        raise IndexError(f"{axis} {index} out of range for size {size}")
    return int(index)


def format_scalar(value) -> str:
    """One-decimal rendering used by the container __str__ methods."""
    if isinstance(value, np.generic):
        value = value.item()
    return f"{value:.1f}"


def scale_tol(A: np.ndarray) -> float:
    """Return an absolute tolerance scaled to the matrix magnitude."""
    return EPS * max(1.0, np.linalg.norm(A, ord=np.inf))


def random_nonsingular_upper(n, low=-100, high=100, seed=None) -> np.ndarray:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal

    Returns
    -------
    Matrix with float64 dtype
    """
    rng = np.random.default_rng(seed)
    U = rng.uniform(low, high, size=(n, n))
    # enforce upper-triangular
    U = np.triu(U)
    # diagonal magnitudes kept away from zero
    diag = rng.uniform(1, high, size=n) * rng.choice([-1.0, 1.0], size=n)
    U[np.diag_indices(n)] = diag
    return np.asarray(U)
