"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Exact integer points and vectors.

Points and vectors are plain tuples of Python ints, which gives arbitrary
precision, hashing and lexicographic ordering. Nothing here ever goes through
floating point.
"""

import operator
from functools import reduce
from math import gcd

import numpy as np

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def to_integer(value):
    """
    Coerce a coordinate to a Python int.

    Accepts Python ints and numpy integer scalars. Floats (even integral
    ones) and booleans are rejected.

    Raises:
        TypeError: If value is not an integer.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected an integer coordinate, got boolean {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"Expected an integer coordinate, got {value!r}") from None


def as_point(coordinates, dimension=None):
    """
    Convert a sequence (or 1D numpy array) of integers to a point tuple.

    Parameters:
    - coordinates: sequence of integral values.
    - dimension (int): expected dimension, checked when given.

    Returns:
    - tuple of int
    """
    point = tuple(to_integer(c) for c in coordinates)
    if dimension is not None and len(point) != dimension:
        raise ValueError(
            f"Expected a point of dimension {dimension}, got {len(point)} coordinates"
        )
    return point


def as_points(points, dimension=None):
    """Convert an iterable of points (or a 2D integer array) to a list of tuples."""
    return [as_point(p, dimension) for p in points]


def _check_same_dimension(u, v):
    if len(u) != len(v):
        raise ValueError(f"Dimension mismatch: {len(u)} != {len(v)}")


def dot(u, v):
    _check_same_dimension(u, v)
    return sum(a * b for a, b in zip(u, v))


def add(u, v):
    _check_same_dimension(u, v)
    return tuple(a + b for a, b in zip(u, v))


def sub(u, v):
    _check_same_dimension(u, v)
    return tuple(a - b for a, b in zip(u, v))


def is_zero(u):
    return all(a == 0 for a in u)


def gcd_of(u):
    """GCD of all components (0 for the zero vector)."""
    return reduce(gcd, u, 0)


def reduce_by_gcd(u):
    """Divide all components by their GCD. The zero vector is returned as is."""
    g = gcd_of(u)
    if g <= 1:
        return tuple(u)
    return tuple(a // g for a in u)


def norm_l1(u):
    return sum(abs(a) for a in u)


def norm_inf(u):
    return max((abs(a) for a in u), default=0)


def norm2_squared(u):
    return sum(a * a for a in u)


def ceil_div(a, b):
    return -((-a) // b)


def determinant(matrix):
    """
    Exact determinant of a square integer matrix.

    Uses the fraction-free Bareiss elimination, so every intermediate value
    stays an integer.
    """
    m = [list(row) for row in matrix]
    n = len(m)
    if any(len(row) != n for row in m):
        raise ValueError("Determinant requires a square matrix")
    if n == 0:
        return 1

    sign = 1
    previous_pivot = 1
    for k in range(n - 1):
        if m[k][k] == 0:
            swap = next((i for i in range(k + 1, n) if m[i][k] != 0), None)
            if swap is None:
                return 0
            m[k], m[swap] = m[swap], m[k]
            sign = -sign
        for i in range(k + 1, n):
            for j in range(k + 1, n):
                m[i][j] = (m[i][j] * m[k][k] - m[i][k] * m[k][j]) // previous_pivot
        previous_pivot = m[k][k]
    return sign * m[n - 1][n - 1]


def to_array(points):
    """
    Stack points into a 2D numpy array.

    The array has dtype int64 when every coordinate fits, and dtype object
    (Python ints) otherwise, so no value is ever truncated.
    """
    points = [tuple(p) for p in points]
    fits = all(INT64_MIN <= c <= INT64_MAX for p in points for c in p)
    return np.array(points, dtype=np.int64 if fits else object)
