"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Unit tests for exact facet and vertex enumeration.
"""

from fractions import Fraction

import pytest

from digital_geometry import DegenerateInputError, HalfSpace
from digital_geometry.geometry import (
    bounding_box,
    facet_half_spaces,
    feasible_vertices,
    hull_vertices,
    is_bounded,
    unique_points,
)

TRIANGLE = [(0, 0), (5, 0), (0, 7)]


@pytest.fixture
def triangle_half_spaces():
    return facet_half_spaces(TRIANGLE)


def test_triangle_facets(triangle_half_spaces):
    assert triangle_half_spaces == [
        HalfSpace((-1, 0), 0),
        HalfSpace((0, -1), 0),
        HalfSpace((7, 5), 35),
    ]


def test_facets_ignore_inner_and_duplicate_points():
    points = TRIANGLE + [(1, 1), (2, 0), (0, 0), (1, 5)]
    assert facet_half_spaces(points) == facet_half_spaces(TRIANGLE)


def test_every_point_satisfies_every_facet():
    points = [(0, 0, 0), (6, 3, 0), (0, 5, 10), (6, 4, 8), (2, 2, 2)]
    facets = facet_half_spaces(points)
    assert len(facets) == 4, "A 3D simplex has four facets"
    for h in facets:
        for p in points:
            assert h.contains(p), f"{p} violates facet {h}"


def test_cube_facets():
    cube = [(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)]
    facets = facet_half_spaces(cube)
    assert len(facets) == 6
    assert all(h.is_axis_aligned() for h in facets)


def test_one_dimensional_hull():
    assert facet_half_spaces([(3,), (1,), (5,)]) == [
        HalfSpace((-1,), -1),
        HalfSpace((1,), 5),
    ]


@pytest.mark.parametrize(
    "points",
    [
        [],
        [(0, 0), (1, 1), (2, 2)],
        [(0, 0), (1, 0)],
        [(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)],
    ],
)
def test_degenerate_inputs(points):
    with pytest.raises(DegenerateInputError):
        facet_half_spaces(points)


def test_mixed_dimensions_rejected():
    with pytest.raises(ValueError):
        unique_points([(0, 0), (1, 1, 1)])


def test_hull_vertices():
    points = TRIANGLE + [(1, 1), (2, 0), (0, 3)]
    assert hull_vertices(points) == [(0, 0), (0, 7), (5, 0)]


def test_feasible_vertices_are_exact(triangle_half_spaces):
    assert feasible_vertices(triangle_half_spaces, 2) == [(0, 0), (0, 7), (5, 0)]

    half_spaces = [HalfSpace((-1, 0), 0), HalfSpace((0, -1), 0), HalfSpace((2, 1), 7)]
    vertices = feasible_vertices(half_spaces, 2)
    assert (Fraction(7, 2), 0) in vertices


def test_is_bounded(triangle_half_spaces):
    assert is_bounded(triangle_half_spaces, 2)
    assert not is_bounded([HalfSpace((1, 1), 3)], 2)
    strip = [HalfSpace((1, 0), 1), HalfSpace((-1, 0), 0)]
    assert not is_bounded(strip, 2), "A strip is unbounded along its direction"


def test_bounding_box(triangle_half_spaces):
    assert bounding_box(triangle_half_spaces, 2) == ((0, 0), (5, 7))


def test_dense_grid_hull():
    grid = [(x, y, z) for x in range(5) for y in range(5) for z in range(5)]
    facets = facet_half_spaces(grid)
    assert len(facets) == 6, "Interior and face points of a grid add no facet"
    assert HalfSpace((1, 0, 0), 4) in facets
    assert HalfSpace((0, 0, -1), 0) in facets
    assert len(hull_vertices(grid)) == 8


def test_large_dense_grid_hull():
    grid = [(x, y, z) for x in range(10) for y in range(10) for z in range(10)]
    assert len(facet_half_spaces(grid)) == 6


def test_bounding_box_rounds_outwards():
    half_spaces = [HalfSpace((-1, 0), 0), HalfSpace((0, -1), 0), HalfSpace((2, 3), 7)]
    # vertices (0, 0), (7/2, 0) and (0, 7/3)
    assert bounding_box(half_spaces, 2) == ((0, 0), (4, 3))


def test_infeasible_system():
    infeasible = [HalfSpace((1, 0), 0), HalfSpace((-1, 0), -1)]
    assert feasible_vertices(infeasible, 2) == []
    assert bounding_box(infeasible, 2) is None
    assert is_bounded(infeasible, 2), "An empty system is bounded"
