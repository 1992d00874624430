"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from itertools import product

from ..arithmetic.integer_vector import as_point, as_points
from .vertex_enumeration import bounding_box


class Domain:
    """
    Axis-aligned box of lattice points [lower_bound, upper_bound].

    Both bounds are inclusive. The polytope enumeration walks this box, so a
    domain attached to a polytope must contain every feasible lattice point.
    """

    def __init__(self, lower_bound, upper_bound):
        lower_bound = as_point(lower_bound)
        upper_bound = as_point(upper_bound, len(lower_bound))
        if any(lo > up for lo, up in zip(lower_bound, upper_bound)):
            raise ValueError(
                f"Domain lower bound {lower_bound} exceeds upper bound {upper_bound}"
            )
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    @classmethod
    def from_points(cls, points):
        """Smallest domain containing all given points."""
        points = as_points(points)
        if not points:
            raise ValueError("Cannot build a domain from an empty point set")
        dimension = len(points[0])
        lower = tuple(min(p[i] for p in points) for i in range(dimension))
        upper = tuple(max(p[i] for p in points) for i in range(dimension))
        return cls(lower, upper)

    @classmethod
    def from_half_spaces(cls, half_spaces, dimension=None):
        """
        Domain containing every lattice point of a bounded half-space system.

        The dimension is read from the first half-space when not given.

        Returns:
        - Domain, or None if the system has no real solution.

        Raises:
        - UnboundedPolytopeError: if the system is unbounded.
        """
        half_spaces = list(half_spaces)
        if dimension is None:
            if not half_spaces:
                raise ValueError("Cannot infer the dimension of an empty half-space list")
            dimension = half_spaces[0].dimension
        box = bounding_box(half_spaces, dimension)
        if box is None:
            return None
        return cls(*box)

    @property
    def dimension(self):
        return len(self.lower_bound)

    def extent(self, axis):
        """Number of lattice coordinates along one axis."""
        return self.upper_bound[axis] - self.lower_bound[axis] + 1

    def size(self):
        """Number of lattice points in the domain."""
        total = 1
        for axis in range(self.dimension):
            total *= self.extent(axis)
        return total

    def is_inside(self, point):
        if len(point) != self.dimension:
            return False
        return all(
            lo <= c <= up
            for c, lo, up in zip(point, self.lower_bound, self.upper_bound)
        )

    def __contains__(self, point):
        return self.is_inside(point)

    def __iter__(self):
        # lexicographic: first coordinate varies slowest
        ranges = [range(lo, up + 1) for lo, up in zip(self.lower_bound, self.upper_bound)]
        return iter(product(*ranges))

    def with_bound(self, axis, lower=None, upper=None):
        """
        Domain with one axis clamped to [lower, upper].

        Bounds only ever shrink the domain. Returns None if the clamped
        interval is empty.
        """
        lo = self.lower_bound[axis] if lower is None else max(self.lower_bound[axis], lower)
        up = self.upper_bound[axis] if upper is None else min(self.upper_bound[axis], upper)
        if lo > up:
            return None
        new_lower = list(self.lower_bound)
        new_upper = list(self.upper_bound)
        new_lower[axis], new_upper[axis] = lo, up
        return Domain(new_lower, new_upper)

    def intersect(self, other):
        """Intersection with another domain, or None if they are disjoint."""
        if other.dimension != self.dimension:
            raise ValueError("Cannot intersect domains of different dimensions")
        lower = tuple(max(a, b) for a, b in zip(self.lower_bound, other.lower_bound))
        upper = tuple(min(a, b) for a, b in zip(self.upper_bound, other.upper_bound))
        if any(lo > up for lo, up in zip(lower, upper)):
            return None
        return Domain(lower, upper)

    def scaled(self, factor):
        """Domain of the dilated box factor * [lower, upper] for factor > 0."""
        if factor <= 0:
            raise ValueError(f"Scale factor must be positive, got {factor}")
        return Domain(
            tuple(factor * c for c in self.lower_bound),
            tuple(factor * c for c in self.upper_bound),
        )

    def __eq__(self, other):
        if not isinstance(other, Domain):
            return NotImplemented
        return (
            self.lower_bound == other.lower_bound
            and self.upper_bound == other.upper_bound
        )

    def __hash__(self):
        return hash((self.lower_bound, self.upper_bound))

    def __repr__(self):
        return f"Domain(lower_bound={self.lower_bound}, upper_bound={self.upper_bound})"
