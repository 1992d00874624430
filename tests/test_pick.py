"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Unit tests for Pick's formula checks and exact volumes.
"""

from fractions import Fraction

import pytest

from digital_geometry import BoundedLatticePolytope
from digital_geometry.geometry import (
    check_pick,
    convex_polygon,
    pick_area2,
    polygon_area2,
    simplex_volume,
)

TRIANGLE = [(0, 0), (5, 0), (0, 7)]


@pytest.mark.parametrize("use_interior_polytope", [False, True])
def test_pick_holds_on_triangle(use_interior_polytope):
    P = BoundedLatticePolytope(vertices=TRIANGLE)
    result = check_pick(P, TRIANGLE, use_interior_polytope)
    assert result.area2 == 35
    assert result.pick_area2 == 35
    assert result.holds, f"Pick's formula failed: {result}"


@pytest.mark.parametrize(
    "vertices",
    [
        [(0, 0), (4, 0), (4, 3), (0, 3)],
        [(0, 0), (3, 1), (1, 3)],
        [(-2, 1), (3, -4), (5, 2), (0, 6), (-3, 4)],
    ],
)
def test_pick_holds_on_polygons(vertices):
    P = BoundedLatticePolytope(vertices=vertices)
    assert check_pick(P, vertices).holds


def test_pick_after_cut_needs_integer_hull():
    P = BoundedLatticePolytope(vertices=TRIANGLE)
    P.cut((-1, 1), 3)
    points = P.get_points()
    # (2, 4) is strictly inside the rational cut polygon but is a vertex of
    # its integer hull, so only the hull satisfies Pick's formula
    assert P.is_interior((2, 4))
    assert not check_pick(P, points).holds

    hull = BoundedLatticePolytope(vertices=points)
    assert hull.is_boundary((2, 4))
    result = check_pick(hull, points)
    assert result.area2 == 27
    assert result.holds


def test_pick_requires_2d():
    P = BoundedLatticePolytope(vertices=[(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)])
    with pytest.raises(ValueError):
        pick_area2(P)


def test_convex_polygon_is_counter_clockwise():
    points = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 1), (1, 0)]
    assert convex_polygon(points) == [(0, 0), (2, 0), (2, 2), (0, 2)]
    assert polygon_area2(points) == 8


def test_degenerate_polygon_has_zero_area():
    assert polygon_area2([(0, 0), (1, 1), (2, 2)]) == 0


def test_simplex_volume():
    assert simplex_volume(TRIANGLE) == Fraction(35, 2)
    assert simplex_volume([(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]) == Fraction(1, 6)
    assert simplex_volume([(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 8)]) == Fraction(4, 3)
    with pytest.raises(ValueError):
        simplex_volume([(0, 0), (1, 0)])
