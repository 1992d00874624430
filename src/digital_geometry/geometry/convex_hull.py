"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Exact facet enumeration for the convex hull of lattice points.

The points are inserted as generators of a Parma Polyhedra Library polyhedron
and its minimized constraint system gives the facets. PPL works on integer
coefficients throughout, so nearly coplanar inputs cannot produce wrong
facets.
"""

import logging

import ppl

from ..arithmetic.integer_vector import as_points
from ..core.exceptions import DegenerateInputError
from .half_space import HalfSpace
from .vertex_enumeration import integer_coefficients

logger = logging.getLogger(__name__)


def unique_points(points):
    """Deduplicate points, keeping lexicographic order."""
    points = as_points(points)
    if not points:
        return []
    dimension = len(points[0])
    if any(len(p) != dimension for p in points):
        raise ValueError("All points must have the same dimension")
    return sorted(set(points))


def hull_polyhedron(points):
    """
    Build the ppl polyhedron spanned by a non-empty list of points.

    Args:
        points: list of point tuples, all of the same dimension

    Returns:
        ppl.C_Polyhedron of space dimension len(points[0])
    """
    dimension = len(points[0])
    gs = ppl.Generator_System()
    for p in points:
        gs.insert(ppl.point(ppl.Linear_Expression(list(p), 0)))
    poly = ppl.C_Polyhedron(dimension, "empty")
    poly.add_generators(gs)
    return poly


def check_full_dimensional(points):
    """
    Raise DegenerateInputError unless the points affinely span their space.

    Args:
        points: list of point tuples, all of the same dimension

    Returns:
        the ppl polyhedron spanned by the points
    """
    if not points:
        raise DegenerateInputError("Cannot build a polytope from an empty point set")
    dimension = len(points[0])
    if dimension == 0:
        raise DegenerateInputError("Points must have at least one coordinate")
    poly = hull_polyhedron(points)
    if poly.affine_dimension() < dimension:
        raise DegenerateInputError(
            f"{len(points)} points do not span a full-dimensional region of Z^{dimension}"
        )
    return poly


def facet_half_spaces(points):
    """
    Compute the facet half-spaces of the convex hull of a lattice point set.

    Parameters:
    - points: sequence of integer points of a common dimension d >= 1.

    Returns:
    - list of HalfSpace, one per facet, sorted by (normal, offset).

    Raises:
    - DegenerateInputError: if the points do not span a d-dimensional region.
    """
    points = unique_points(points)
    poly = check_full_dimensional(points)
    dimension = len(points[0])

    facets = []
    for ineq in poly.minimized_constraints():
        # a . x + b >= 0 is the half-space -a . x <= b
        a = integer_coefficients(ineq, dimension)
        facets.append(HalfSpace(tuple(-c for c in a), int(ineq.inhomogeneous_term())))

    logger.debug(
        "Convex hull of %d points in Z^%d has %d facets",
        len(points), dimension, len(facets),
    )
    return sorted(facets, key=lambda h: (h.normal, h.offset))


def hull_vertices(points):
    """Extreme points of the convex hull, in lexicographic order."""
    points = unique_points(points)
    poly = check_full_dimensional(points)
    dimension = len(points[0])
    return sorted(
        integer_coefficients(g, dimension)
        for g in poly.minimized_generators()
        if g.is_point()
    )
