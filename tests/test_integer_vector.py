"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Unit tests for exact integer vector arithmetic.
"""

import numpy as np
import pytest

from digital_geometry.arithmetic import (
    as_point,
    ceil_div,
    determinant,
    dot,
    gcd_of,
    norm2_squared,
    norm_inf,
    norm_l1,
    reduce_by_gcd,
    to_array,
    to_integer,
)


def test_to_integer_accepts_python_and_numpy_ints():
    assert to_integer(5) == 5
    assert to_integer(np.int64(-3)) == -3
    assert type(to_integer(np.int32(7))) is int


@pytest.mark.parametrize("value", [1.0, 2.5, True, "3"])
def test_to_integer_rejects_non_integers(value):
    with pytest.raises(TypeError):
        to_integer(value)


def test_as_point_checks_dimension():
    assert as_point(np.array([1, 2, 3])) == (1, 2, 3)
    with pytest.raises(ValueError):
        as_point((1, 2), dimension=3)


def test_dot_rejects_dimension_mismatch():
    assert dot((1, 2, 3), (4, 5, 6)) == 32
    with pytest.raises(ValueError):
        dot((1, 2), (1, 2, 3))


def test_gcd_reduction():
    assert gcd_of((4, -6, 8)) == 2
    assert reduce_by_gcd((4, -6, 8)) == (2, -3, 4)
    assert reduce_by_gcd((0, 0)) == (0, 0)


@pytest.mark.parametrize(
    "a, b, expected",
    [(7, 2, 4), (-7, 2, -3), (7, -2, -3), (-7, -2, 4), (6, 3, 2)],
)
def test_ceil_div(a, b, expected):
    assert ceil_div(a, b) == expected


def test_determinant_matches_known_values():
    assert determinant([[2, 0], [0, 3]]) == 6
    assert determinant([[0, 1], [1, 0]]) == -1
    assert determinant([[1, 2, 3], [4, 5, 6], [7, 8, 10]]) == -3
    assert determinant([[1, 2], [2, 4]]) == 0


def test_determinant_handles_large_entries():
    big = 10**30
    assert determinant([[big, 1], [1, big]]) == big * big - 1


def test_norms():
    v = (3, -4, 0)
    assert norm_l1(v) == 7
    assert norm_inf(v) == 4
    assert norm2_squared(v) == 25
    assert norm_inf(()) == 0, "The empty vector has a zero sup norm"


def test_norms_stay_exact_on_big_coordinates():
    big = 10**40
    assert norm_l1((big, -big)) == 2 * big
    assert norm2_squared((big, 1)) == big * big + 1


def test_to_array_keeps_big_values():
    small = to_array([(1, 2), (3, 4)])
    assert small.dtype == np.int64
    big = to_array([(2**70, 0)])
    assert big.dtype == object
    assert big[0, 0] == 2**70
