# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from minimatrix.errors import DimensionMismatchError
from minimatrix.matrix import Matrix
from minimatrix.vectors import (
    Vector,
    angle,
    angle_cos,
    cross_product,
    dot_product,
    linear_combination,
)


def test_construction():
    v = Vector([1, 2, 3])
    assert v.size == len(v) == 3
    assert list(v) == [1, 2, 3]
    assert Vector.zero(4) == Vector([0.0, 0.0, 0.0, 0.0])
    with pytest.raises(DimensionMismatchError):
        Vector([[1, 2], [3, 4]])
    with pytest.raises(DimensionMismatchError):
        Vector([])
    with pytest.raises(TypeError):
        Vector([True, False])


def test_indexing():
    v = Vector([1.0, 2.0, 3.0])
    v[1] = 5.0
    assert v[1] == 5.0
    for i in (3, -1):
        with pytest.raises(IndexError):
            v[i]


def test_vec_add():
    u = Vector([2.0, 3.0])
    u.add(Vector([5.0, 7.0]))
    assert u == Vector([7.0, 10.0])
    assert Vector([5, 5, 5]) == Vector([1, 1, 1]) + Vector([4, 4, 4])


def test_vec_sub():
    u = Vector([2.0, 3.0])
    u.sub(Vector([5.0, 7.0]))
    assert u == Vector([-3.0, -4.0])
    assert Vector([2.0, 3.0]) - Vector([5.0, 7.0]) == Vector([-3.0, -4.0])

    u = Vector([2.0, 3.0])
    u -= Vector([1.0, 1.0])
    assert u == Vector([1.0, 2.0])


def test_scalar_mul():
    u = Vector([2.0, 3.0])
    u.scl(2.0)
    assert u == Vector([4.0, 6.0])
    assert Vector([10, 10, 10]) == 5 * Vector([2, 2, 2])
    assert Vector([2, 2, 2]) * 5 == Vector([10, 10, 10])
    assert -Vector([1, -2]) == Vector([-1, 2])


def test_size_mismatch():
    u = Vector([1.0, 2.0])
    with pytest.raises(DimensionMismatchError):
        u.add(Vector([1.0, 2.0, 3.0]))
    with pytest.raises(DimensionMismatchError):
        u + Vector([1.0])
    with pytest.raises(DimensionMismatchError):
        u.dot(Vector([1.0, 2.0, 3.0]))
    assert u == Vector([1.0, 2.0])


def test_dot_product():
    assert Vector([0.0, 0.0]).dot(Vector([1.0, 1.0])) == 0.0
    assert Vector([1.0, 1.0]).dot(Vector([1.0, 1.0])) == 2.0
    assert Vector([-1.0, 6.0]).dot(Vector([3.0, 2.0])) == 9.0
    assert dot_product(Vector([5, 5, 5]), Vector([5, 5, 5])) == 75


def test_norms():
    v = Vector([0.0, 0.0, 0.0])
    assert (v.norm_1(), v.norm(), v.norm_inf()) == (0.0, 0.0, 0.0)

    v = Vector([1.0, 2.0, 3.0])
    assert v.norm_1() == 6.0
    assert math.isclose(v.norm(), 3.74165738, abs_tol=1e-8)
    assert v.norm_inf() == 3.0

    v = Vector([-1, -2])
    assert v.norm_1() == 3.0
    assert math.isclose(v.norm(), 2.236067977, abs_tol=1e-8)
    assert v.norm_inf() == 2.0
    assert Vector([3.0, 4.0]).allclose(Vector([3.0, 4.0 + 1e-12]))

    # Test with perfect square trinomials
    assert Vector([4, 0, 0]).norm() == 4
    assert Vector([0, 0, 4]).norm() == 4


def test_linear_combination():
    e1 = Vector([1.0, 0.0, 0.0])
    e2 = Vector([0.0, 1.0, 0.0])
    e3 = Vector([0.0, 0.0, 1.0])
    v1 = Vector([1.0, 2.0, 3.0])
    v2 = Vector([0.0, 10.0, -100.0])

    assert linear_combination([e1, e2, e3], [10.0, -2.0, 0.5]) == Vector([10.0, -2.0, 0.5])
    assert linear_combination([v1, v2], [10.0, -2.0]) == Vector([10.0, 0.0, 230.0])
    # integers in, floats out when a scalar is a float
    assert linear_combination([Vector([1, 2])], [0.5]) == Vector([0.5, 1.0])
    # inputs untouched
    assert v1 == Vector([1.0, 2.0, 3.0])


def test_linear_combination_errors():
    with pytest.raises(DimensionMismatchError):
        linear_combination([Vector([1, 2])], [1, 2])
    with pytest.raises(ValueError):
        linear_combination([], [])
    with pytest.raises(DimensionMismatchError):
        linear_combination([Vector([1, 2]), Vector([1, 2, 3])], [1, 1])


def test_angle_cos():
    assert math.isclose(angle_cos(Vector([1.0, 0.0]), Vector([1.0, 0.0])), 1.0)
    assert math.isclose(angle_cos(Vector([1.0, 0.0]), Vector([0.0, 1.0])), 0.0)
    assert math.isclose(angle_cos(Vector([-1.0, 1.0]), Vector([1.0, -1.0])), -1.0)
    assert math.isclose(angle_cos(Vector([2.0, 1.0]), Vector([4.0, 2.0])), 1.0)
    assert math.isclose(
        angle_cos(Vector([1.0, 2.0, 3.0]), Vector([4.0, 5.0, 6.0])),
        0.974631846,
        abs_tol=1e-9,
    )
    with pytest.raises(ValueError):
        angle_cos(Vector([0.0, 0.0]), Vector([1.0, 1.0]))


def test_angle():
    test_cases = [
        ((1, 0, 0), (0, 1, 0), math.pi / 2),
        ((1, 2, 3), (1, 2, 3), 0.0),
        ((1, 0, 0), (-1, 0, 0), math.pi),
        ((1, 0, 0), (1, 1, 0), math.pi / 4),
        ((2, -1, 3), (0, 4, -2), 2.21131864),
        ((3, -3, 1), (4, 9, 2), 1.8720947029995874),
    ]
    for u_vals, v_vals, expected in test_cases:
        u, v = Vector(u_vals), Vector(v_vals)
        assert math.isclose(angle(u, v), expected, abs_tol=1e-7)


def test_cross_product():
    assert cross_product(Vector([0.0, 0.0, 1.0]), Vector([1.0, 0.0, 0.0])) == Vector(
        [0.0, 1.0, 0.0]
    )
    assert cross_product(Vector([1.0, 2.0, 3.0]), Vector([4.0, 5.0, 6.0])) == Vector(
        [-3.0, 6.0, -3.0]
    )
    assert cross_product(Vector([4.0, 2.0, -3.0]), Vector([-2.0, -5.0, 16.0])) == Vector(
        [17.0, -58.0, -16.0]
    )
    assert cross_product(Vector([2, -1, 3]), Vector([0, 4, -2])) == Vector([-10, 4, 8])
    # Parallel vectors, result should be 0 vector
    assert cross_product(Vector([2, 4, 6]), Vector([1, 2, 3])) == Vector([0, 0, 0])


def test_cross_product_requires_3d():
    with pytest.raises(DimensionMismatchError):
        cross_product(Vector([1.0, 2.0]), Vector([3.0, 4.0]))


def test_formatting():
    assert str(Vector([2, 3])) == "[2.0, 3.0]"
    assert str(Vector([-1.25, 0.0])) == "[-1.2, 0.0]"
    assert repr(Vector([1, 2])) == "Vector([1, 2])"
    assert np.array_equal(np.asarray(Vector([1, 2])), [1, 2])


def test_numpy_scalar_operands_keep_vector():
    scaled = np.int64(3) * Vector([1, 2])
    assert isinstance(scaled, Vector)
    assert scaled == Vector([3, 6])
    assert isinstance(Vector([1.0, 2.0]) * np.float64(0.5), Vector)


def test_vector_times_matrix_is_unsupported():
    with pytest.raises(TypeError):
        Vector([1.0, 2.0]) * Matrix([[1.0, 2.0], [3.0, 4.0]])
    with pytest.raises(TypeError):
        Matrix([[1.0, 2.0], [3.0, 4.0]]) * Vector([1.0, 2.0])
    v = Vector([1.0, 2.0])
    with pytest.raises(TypeError):
        v *= Matrix([[1.0, 2.0], [3.0, 4.0]])
    assert v == Vector([1.0, 2.0])
