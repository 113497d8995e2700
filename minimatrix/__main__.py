#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Worked examples for every operation, ``python -m minimatrix``
"""

import argparse
import logging

from .elimination import rank, row_echelon
from .errors import MiniMatrixError
from .matrix import Matrix
from .matrix_functions import determinant, inverse
from .vectors import Vector, angle_cos, cross_product, linear_combination

logger = logging.getLogger("minimatrix")


def _show(label, value):
    print(f"{label}:")
    print(value)


def vectors_section():
    u = Vector([2.0, 3.0])
    u.add(Vector([5.0, 7.0]))
    _show("[2, 3] + [5, 7]", u)

    u = Vector([2.0, 3.0])
    u.sub(Vector([5.0, 7.0]))
    _show("[2, 3] - [5, 7]", u)

    u = Vector([2.0, 3.0])
    u.scl(2.0)
    _show("2 * [2, 3]", u)

    _show("[-1, 6] . [3, 2]", Vector([-1.0, 6.0]).dot(Vector([3.0, 2.0])))

    e1, e2, e3 = Vector([1.0, 0, 0]), Vector([0, 1.0, 0]), Vector([0, 0, 1.0])
    _show("10 e1 - 2 e2 + 0.5 e3", linear_combination([e1, e2, e3], [10.0, -2.0, 0.5]))

    v = Vector([1.0, -2.0, 3.0])
    _show("norms of [1, -2, 3]", f"{v.norm_1()} {v.norm():.4f} {v.norm_inf()}")
    _show(
        "cos([1, 2, 3], [4, 5, 6])",
        f"{angle_cos(Vector([1.0, 2, 3]), Vector([4.0, 5, 6])):.9f}",
    )
    _show("[4, 2, -3] x [-2, -5, 16]", cross_product(Vector([4.0, 2, -3]), Vector([-2.0, -5, 16])))


def matrices_section():
    u = Matrix([[1.0, 2.0], [3.0, 4.0]])
    v = Matrix([[7.0, 4.0], [-2.0, 2.0]])
    _show("U + V", u + v)
    _show("U - V", u - v)
    _show("2 U", u * 2.0)
    _show("U [4, 2]", u @ Vector([4.0, 2.0]))
    _show("U V", u @ v)
    _show("trace U", u.trace())
    _show("transpose [[1, 2, 3], [4, 5, 6]]", Matrix([[1.0, 2, 3], [4, 5, 6]]).transpose())


def echelon_section():
    for data in (
        [[1, 2], [2, 4]],
        [[8, 5, -2, 4, 28], [4, 2.5, 20, 4, -4], [8, 5, 1, 4, 17]],
    ):
        _show(f"row echelon of {data}", row_echelon(Matrix(data)))


def determinant_section():
    for data in (
        [[1, -1], [-1, 1]],
        [[2, 0, 0], [0, 2, 0], [0, 0, 2]],
        [[8, 5, -2], [4, 7, 20], [7, 6, 1]],
        [[8, 5, -2, 4], [4, 2.5, 20, 4], [8, 5, 1, 4], [28, -4, 17, 1]],
    ):
        _show(f"det {data}", determinant(Matrix(data)))


def inverse_section():
    for data in (
        [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
        [[2, 0, 0], [0, 2, 0], [0, 0, 2]],
        [[8, 5, -2], [4, 7, 20], [7, 6, 1]],
        [[1, 2], [2, 4]],
    ):
        try:
            _show(f"inverse {data}", inverse(Matrix(data)))
        except MiniMatrixError as e:
            _show(f"inverse {data}", f"not invertible: {e}")


def rank_section():
    for data in (
        [[1, 0, 0], [0, 1, 0], [0, 0, 1]],
        [[1, 2, 0, 0], [2, 4, 0, 0], [-1, 2, 1, 1]],
        [[8, 5, -2], [4, 7, 20], [7, 6, 1], [21, 18, 7]],
    ):
        _show(f"rank {data}", rank(Matrix(data)))


SECTIONS = {
    "vectors": vectors_section,
    "matrices": matrices_section,
    "echelon": echelon_section,
    "determinant": determinant_section,
    "inverse": inverse_section,
    "rank": rank_section,
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="minimatrix",
        description="Print worked examples of the minimatrix operations",
    )
    parser.add_argument(
        "--section",
        action="append",
        choices=sorted(SECTIONS),
        help="Section to run, may be repeated (default: all)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    for name in args.section or list(SECTIONS):
        logger.info(f"running section {name}")
        print(f"==== {name} ====")
        SECTIONS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
