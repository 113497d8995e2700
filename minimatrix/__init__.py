# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
minimatrix
==========

A small linear-algebra toolkit of fixed-shape vectors and matrices with
dimension-checked arithmetic and closed-form decompositions.

Public API
~~~~~~~~~~
- Containers
    - `Vector`, `Matrix`
- Vector operations
    - `dot_product`, `linear_combination`, `angle_cos`, `angle`,
      `cross_product`
- Decompositions
    - `row_echelon`, `rank`
    - `determinant`, `minor`, `cofactor`, `adjugate`, `inverse`
- Errors
    - `MiniMatrixError`, `DimensionMismatchError`,
      `UnsupportedDimensionError`, `SingularMatrixError`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import minimatrix as mm
>>> A = mm.Matrix([[2, 0], [0, 2]])
>>> print(mm.inverse(A))
[0.5, 0.0]
[0.0, 0.5]
"""

from importlib.metadata import version as _pkg_version

from .elimination import rank, row_echelon
from .errors import (
    DimensionMismatchError,
    MiniMatrixError,
    SingularMatrixError,
    UnsupportedDimensionError,
)
from .matrix import Matrix
from .matrix_functions import adjugate, cofactor, determinant, inverse, minor
from .vectors import (
    Vector,
    angle,
    angle_cos,
    cross_product,
    dot_product,
    linear_combination,
)

__all__ = [
    "Vector",
    "Matrix",
    "dot_product",
    "linear_combination",
    "angle_cos",
    "angle",
    "cross_product",
    "row_echelon",
    "rank",
    "determinant",
    "minor",
    "cofactor",
    "adjugate",
    "inverse",
    "MiniMatrixError",
    "DimensionMismatchError",
    "UnsupportedDimensionError",
    "SingularMatrixError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show minimatrix”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
