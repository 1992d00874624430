"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Classification of lattice points against a set of half-spaces.

A point is inside when it satisfies every half-space, on the boundary when it
is inside and at least one half-space is tight, and interior when it is
inside and no half-space is tight. Boundary and interior partition the inside
points.
"""

from enum import Enum

import numpy as np

from ..arithmetic.integer_vector import to_array


class PointClass(Enum):
    EXTERIOR = 0
    BOUNDARY = 1
    INTERIOR = 2

    @property
    def is_inside(self):
        return self is not PointClass.EXTERIOR


def classify_point(point, half_spaces):
    """Classify one point in O(number of half-spaces)."""
    tight = False
    for half_space in half_spaces:
        value = half_space.evaluate(point)
        if value > 0:
            return PointClass.EXTERIOR
        if value == 0:
            tight = True
    return PointClass.BOUNDARY if tight else PointClass.INTERIOR


def is_inside(point, half_spaces):
    return all(h.evaluate(point) <= 0 for h in half_spaces)


def is_boundary(point, half_spaces):
    return classify_point(point, half_spaces) is PointClass.BOUNDARY


def is_interior(point, half_spaces):
    return all(h.evaluate(point) < 0 for h in half_spaces)


def classify_points(points, half_spaces):
    """
    Classify many points at once.

    Evaluation is done on numpy arrays of Python ints (dtype object), so the
    products never overflow.

    Args:
        points: sequence of points or 2D integer array of shape (N, d)
        half_spaces: sequence of HalfSpace

    Returns:
        np.ndarray of shape (N,) holding PointClass members
    """
    P = to_array(points).astype(object)
    n_points = P.shape[0]
    if n_points == 0:
        return np.empty(0, dtype=object)
    if not half_spaces:
        return np.full(n_points, PointClass.INTERIOR, dtype=object)

    A = np.array([h.normal for h in half_spaces], dtype=object)
    b = np.array([h.offset for h in half_spaces], dtype=object)
    values = np.dot(P, A.T) - b  # (N, m)

    outside = np.asarray(values > 0, dtype=bool).any(axis=1)
    tight = np.asarray(values == 0, dtype=bool).any(axis=1)

    classes = np.full(n_points, PointClass.INTERIOR, dtype=object)
    classes[tight] = PointClass.BOUNDARY
    classes[outside] = PointClass.EXTERIOR
    return classes
