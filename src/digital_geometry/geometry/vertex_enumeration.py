"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Exact vertex enumeration of half-space systems.

The system {x : A x <= b} is handed to the Parma Polyhedra Library, which
computes the minimized generator system of the polyhedron over the integers.
Vertices come back as integer coefficients over a common divisor, so they are
rebuilt as fractions and the bounding boxes derived from them never lose a
lattice point to rounding.
"""

import logging
import math
from fractions import Fraction

import ppl

from ..core.exceptions import UnboundedPolytopeError

logger = logging.getLogger(__name__)


def to_polyhedron(half_spaces, dimension):
    """
    Build the closed polyhedron {x : A x <= b} of a half-space system.

    Each half-space a . x <= b is inserted as the constraint b - a . x >= 0.

    Parameters:
    - half_spaces: sequence of HalfSpace (anything with normal and offset).
    - dimension (int): dimension of the ambient space.

    Returns:
    - ppl.C_Polyhedron
    """
    poly = ppl.C_Polyhedron(dimension, "universe")
    cs = ppl.Constraint_System()
    for h in half_spaces:
        if len(h.normal) != dimension:
            raise ValueError(
                f"Half-space of dimension {len(h.normal)} in a system of dimension {dimension}"
            )
        cs.insert(ppl.Linear_Expression([-a for a in h.normal], h.offset) >= 0)
    poly.add_constraints(cs)
    return poly


def integer_coefficients(row, dimension):
    """Coefficients of a ppl constraint or generator as ints, padded to dimension."""
    coefficients = tuple(int(c) for c in row.coefficients())
    return coefficients + (0,) * (dimension - len(coefficients))


def polyhedron_vertices(poly):
    """Vertices of a ppl polyhedron as sorted tuples of fractions.Fraction."""
    dimension = poly.space_dimension()
    vertices = []
    for g in poly.minimized_generators():
        if not g.is_point():
            continue
        divisor = int(g.divisor())
        vertices.append(
            tuple(Fraction(c, divisor) for c in integer_coefficients(g, dimension))
        )
    return sorted(vertices)


def feasible_vertices(half_spaces, dimension):
    """
    Compute the vertices of {x : A x <= b} exactly.

    Parameters:
    - half_spaces: sequence of HalfSpace (anything with normal and offset).
    - dimension (int): dimension of the ambient space.

    Returns:
    - sorted list of vertices, each a tuple of fractions.Fraction. The list
      is empty when the system is infeasible.
    """
    poly = to_polyhedron(half_spaces, dimension)
    if poly.is_empty():
        return []
    return polyhedron_vertices(poly)


def is_bounded(half_spaces, dimension):
    """
    Tell whether the half-space system describes a bounded set.

    An infeasible system is bounded.
    """
    return to_polyhedron(half_spaces, dimension).is_bounded()


def bounding_box(half_spaces, dimension):
    """
    Exact integer bounding box of a bounded half-space system.

    Minima are rounded down and maxima up, so the box contains every lattice
    point satisfying the system.

    Returns:
    - (lower, upper) tuples of int, or None if the system is infeasible.

    Raises:
    - UnboundedPolytopeError: if the system is not bounded.
    """
    poly = to_polyhedron(half_spaces, dimension)
    if poly.is_empty():
        logger.debug("Half-space system is infeasible")
        return None
    if not poly.is_bounded():
        raise UnboundedPolytopeError(
            "Half-space system has a non-trivial recession cone"
        )
    vertices = polyhedron_vertices(poly)
    lower = tuple(math.floor(min(v[i] for v in vertices)) for i in range(dimension))
    upper = tuple(math.ceil(max(v[i] for v in vertices)) for i in range(dimension))
    return lower, upper
