"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Exact areas and volumes used to validate lattice point counts.

Pick's theorem states that a lattice polygon with I interior and B boundary
lattice points has area A = I + B / 2 - 1, i.e. 2A = 2I + B - 2. These helpers
are validation tools, not part of the counting engine.
"""

from collections import namedtuple
from fractions import Fraction
from math import factorial

from ..arithmetic.integer_vector import as_points, determinant, sub

PickCheck = namedtuple("PickCheck", ["area2", "pick_area2", "holds"])


def _cross2(o, a, b):
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def convex_polygon(points):
    """
    Vertices of the convex hull of 2D lattice points, counter-clockwise.

    Monotone chain with exact integer orientation tests; collinear points
    are dropped.
    """
    points = sorted(set(as_points(points, 2)))
    if len(points) <= 2:
        return points

    lower = []
    for p in points:
        while len(lower) >= 2 and _cross2(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)
    upper = []
    for p in reversed(points):
        while len(upper) >= 2 and _cross2(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)
    return lower[:-1] + upper[:-1]


def polygon_area2(points):
    """Twice the area of the convex hull of 2D lattice points (an integer)."""
    polygon = convex_polygon(points)
    if len(polygon) < 3:
        return 0
    total = 0
    for i, p in enumerate(polygon):
        q = polygon[(i + 1) % len(polygon)]
        total += p[0] * q[1] - p[1] * q[0]
    return abs(total)


def simplex_volume(vertices):
    """
    Exact volume of a d-simplex given by its d + 1 vertices.

    Returns:
    - fractions.Fraction equal to |det(v_1 - v_0, ..., v_d - v_0)| / d!
    """
    vertices = as_points(vertices)
    dimension = len(vertices[0])
    if len(vertices) != dimension + 1:
        raise ValueError(
            f"A simplex of dimension {dimension} needs {dimension + 1} vertices, "
            f"got {len(vertices)}"
        )
    edges = [sub(v, vertices[0]) for v in vertices[1:]]
    return Fraction(abs(determinant(edges)), factorial(dimension))


def pick_area2(polytope, use_interior_polytope=False):
    """
    Right-hand side of Pick's formula, 2I + B - 2, from lattice point counts.

    Parameters:
    - polytope (BoundedLatticePolytope): a 2D polytope.
    - use_interior_polytope (bool): count interior points through
      polytope.interior_polytope() instead of count_interior().
    """
    if polytope.dimension != 2:
        raise ValueError("Pick's formula only holds for 2D polygons")
    if use_interior_polytope:
        nb_interior = polytope.interior_polytope().count()
        nb_boundary = polytope.count() - nb_interior
    else:
        _, nb_interior, nb_boundary = polytope.counts()
    return 2 * nb_interior + nb_boundary - 2


def check_pick(polytope, vertices, use_interior_polytope=False):
    """
    Compare twice the exact area of conv(vertices) with 2I + B - 2.

    Returns:
    - PickCheck(area2, pick_area2, holds)
    """
    area2 = polygon_area2(vertices)
    pick_value = pick_area2(polytope, use_interior_polytope)
    return PickCheck(area2, pick_value, area2 == pick_value)
