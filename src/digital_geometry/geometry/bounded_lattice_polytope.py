"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

import logging
from itertools import chain

import numpy as np

from ..arithmetic.integer_vector import as_point, ceil_div, to_integer
from ..core.exceptions import InvalidPolytopeState, UnboundedPolytopeError
from .classification import PointClass, classify_point
from .convex_hull import facet_half_spaces, unique_points
from .domain import Domain
from .half_space import HalfSpace
from .vertex_enumeration import is_bounded

logger = logging.getLogger(__name__)

_INSIDE = "inside"
_INTERIOR = "interior"
_BOUNDARY = "boundary"


class BoundedLatticePolytope:
    """
    Bounded convex lattice polytope {x in Z^d : A x <= b}.

    The polytope owns an ordered list of canonical half-spaces and a domain
    (axis-aligned box) containing all of its lattice points. It is built from
    a set of lattice points (the facets of their convex hull) or from an
    explicit list of half-spaces, and later shrunk with cut().

    A default constructed polytope is invalid. So is a polytope built from an
    unbounded half-space system: every query on it raises instead of
    returning a meaningless count.

    Point counts are computed by a slice scan: the first d-1 coordinates walk
    the domain, pruned by the half-spaces that only involve coordinates
    already fixed, and on each slice the last coordinate ranges over an exact
    integer interval. Interior points form a sub-interval of it, obtained by
    decreasing every offset by one.
    """

    def __init__(self, vertices=None, half_spaces=None, domain=None):
        """
        Parameters:
        - vertices: sequence of lattice points; the polytope is their convex hull.
        - half_spaces: sequence of HalfSpace or (normal, offset) pairs.
        - domain (Domain): optional box added as extra constraints when
          building from half-spaces.

        Raises:
        - DegenerateInputError: if the vertices are not full-dimensional.
        - InvalidHalfSpace: if a half-space has a zero normal.
        """
        self._dimension = None
        self._half_spaces = []
        self._domain = None
        self._bounded = True
        self._empty = False

        if vertices is not None and half_spaces is not None:
            raise ValueError("Give either vertices or half_spaces, not both")
        if vertices is not None:
            self._init_from_points(vertices)
        elif half_spaces is not None:
            self._init_from_half_spaces(half_spaces, domain)
        elif domain is not None:
            raise ValueError("A domain can only be given together with half_spaces")

    @classmethod
    def from_points(cls, points):
        return cls(vertices=points)

    @classmethod
    def from_half_spaces(cls, half_spaces, domain=None):
        return cls(half_spaces=half_spaces, domain=domain)

    def _init_from_points(self, points):
        points = unique_points(points)
        half_spaces = facet_half_spaces(points)

        self._dimension = len(points[0])
        self._half_spaces = list(half_spaces)
        self._domain = Domain.from_points(points)
        logger.debug(
            "Built polytope from %d points: %d facets, domain %s",
            len(points), len(half_spaces), self._domain,
        )

    def _init_from_half_spaces(self, half_spaces, domain):
        half_spaces = [
            h if isinstance(h, HalfSpace) else HalfSpace(*h) for h in half_spaces
        ]
        if half_spaces:
            dimension = half_spaces[0].dimension
        elif domain is not None:
            dimension = domain.dimension
        else:
            raise ValueError("Cannot infer the dimension of an empty half-space list")

        self._dimension = dimension
        for h in half_spaces:
            self._insert(h)
        if domain is not None:
            if domain.dimension != dimension:
                raise ValueError("Domain and half-spaces have different dimensions")
            for axis in range(dimension):
                self._insert(HalfSpace.axis_aligned(dimension, axis, True, domain.upper_bound[axis]))
                self._insert(HalfSpace.axis_aligned(dimension, axis, False, -domain.lower_bound[axis]))

        if not is_bounded(self._half_spaces, dimension):
            self._bounded = False
            logger.warning(
                "Half-space system with %d inequalities is unbounded; polytope is invalid",
                len(self._half_spaces),
            )
            return

        self._domain = Domain.from_half_spaces(self._half_spaces, dimension)
        if self._domain is None:
            self._empty = True
            logger.debug("Half-space system is infeasible; polytope is empty")

    # ------------------------------------------------------------------
    # Validity and accessors
    # ------------------------------------------------------------------

    def is_valid(self):
        """False for a default constructed or unbounded polytope."""
        return self._dimension is not None and self._bounded

    def _check_valid(self):
        if self._dimension is None:
            raise InvalidPolytopeState("Polytope has not been initialized")
        if not self._bounded:
            raise UnboundedPolytopeError(
                "Polytope is unbounded; its lattice points cannot be enumerated"
            )

    @property
    def dimension(self):
        return self._dimension

    @property
    def half_spaces(self):
        return tuple(self._half_spaces)

    @property
    def domain(self):
        """Box containing all lattice points, or None if there are none."""
        return self._domain

    def nb_half_spaces(self):
        return len(self._half_spaces)

    def inequalities(self):
        """
        Return the system as numpy arrays (A, b) with A x <= b.

        Both arrays have dtype object and hold Python ints.
        """
        d = self._dimension or 0
        A = np.array([h.normal for h in self._half_spaces], dtype=object).reshape(-1, d)
        b = np.array([h.offset for h in self._half_spaces], dtype=object)
        return A, b

    def is_empty(self):
        """True iff the polytope contains no lattice point."""
        self._check_valid()
        return self._empty or self.count_up_to(1) == 0

    def copy(self):
        other = BoundedLatticePolytope()
        other._dimension = self._dimension
        other._half_spaces = list(self._half_spaces)
        other._domain = self._domain
        other._bounded = self._bounded
        other._empty = self._empty
        return other

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _insert(self, half_space):
        if half_space.dimension != self._dimension:
            raise ValueError(
                f"Half-space of dimension {half_space.dimension} does not fit "
                f"a polytope of dimension {self._dimension}"
            )
        for index, existing in enumerate(self._half_spaces):
            if existing.normal == half_space.normal:
                if half_space.offset < existing.offset:
                    self._half_spaces[index] = half_space
                return index
        self._half_spaces.append(half_space)
        return len(self._half_spaces) - 1

    def cut(self, half_space, offset=None):
        """
        Intersect the polytope with one more half-space.

        Call either cut(HalfSpace) or cut(normal, offset). If a half-space
        with the same (canonical) normal is already stored, its offset
        becomes the smaller of the two, so cutting by an implied half-space
        changes nothing.

        Returns:
        - int: index of the inequality holding the cut.

        Raises:
        - InvalidPolytopeState: if the polytope is not valid.
        """
        self._check_valid()
        if offset is not None:
            half_space = HalfSpace(half_space, offset)
        elif not isinstance(half_space, HalfSpace):
            raise TypeError("cut() expects a HalfSpace or a (normal, offset) pair")

        index = self._insert(half_space)
        if half_space.axis is not None and self._domain is not None:
            axis = half_space.axis
            if half_space.normal[axis] > 0:
                self._domain = self._domain.with_bound(axis, upper=half_space.offset)
            else:
                self._domain = self._domain.with_bound(axis, lower=-half_space.offset)
            if self._domain is None:
                self._empty = True
        logger.debug("Cut by %s stored at index %d", half_space, index)
        return index

    def cut_axis(self, axis, positive, offset):
        """Cut by x_axis <= offset (positive) or -x_axis <= offset."""
        self._check_valid()
        return self.cut(HalfSpace.axis_aligned(self._dimension, axis, positive, offset))

    def interior_polytope(self):
        """
        Polytope whose lattice points are the interior points of this one.

        Every offset is decreased by one: for integer normals and points,
        a . x < b is equivalent to a . x <= b - 1.
        """
        self._check_valid()
        other = self.copy()
        other._half_spaces = [h.shifted(1) for h in self._half_spaces]
        return other

    def dilate(self, factor):
        """Return the polytope factor * P for a positive integer factor."""
        self._check_valid()
        factor = to_integer(factor)
        if factor <= 0:
            raise ValueError(f"Dilation factor must be positive, got {factor}")
        other = self.copy()
        other._half_spaces = [HalfSpace(h.normal, factor * h.offset) for h in self._half_spaces]
        if self._domain is not None:
            other._domain = self._domain.scaled(factor)
        return other

    # ------------------------------------------------------------------
    # Point predicates
    # ------------------------------------------------------------------

    def classify(self, point):
        self._check_valid()
        point = as_point(point, self._dimension)
        if self._domain is None or not self._domain.is_inside(point):
            return PointClass.EXTERIOR
        return classify_point(point, self._half_spaces)

    def is_domain_point_inside(self, point):
        """True iff the point lies in the domain and satisfies every half-space."""
        return self.classify(point).is_inside

    def is_inside(self, point):
        return self.is_domain_point_inside(point)

    def is_interior(self, point):
        return self.classify(point) is PointClass.INTERIOR

    def is_boundary(self, point):
        return self.classify(point) is PointClass.BOUNDARY

    def __contains__(self, point):
        return self.is_domain_point_inside(point)

    # ------------------------------------------------------------------
    # Slice scan
    # ------------------------------------------------------------------

    def _pruning_half_spaces(self):
        # half-spaces grouped by their last axis with a non-zero coefficient
        groups = [[] for _ in range(self._dimension)]
        for h in self._half_spaces:
            last_axis = max(i for i, a in enumerate(h.normal) if a != 0)
            groups[last_axis].append(h)
        return groups

    def _prefixes(self):
        """Yield the fixed first d-1 coordinates of every slice to scan."""
        last = self._dimension - 1
        groups = self._pruning_half_spaces()
        lower, upper = self._domain.lower_bound, self._domain.upper_bound

        def walk(depth, prefix):
            if depth == last:
                yield prefix
                return
            lo, up = lower[depth], upper[depth]
            for h in groups[depth]:
                a = h.normal[depth]
                r = h.offset - sum(h.normal[i] * prefix[i] for i in range(depth))
                if a > 0:
                    up = min(up, r // a)
                else:
                    lo = max(lo, ceil_div(r, a))
            for x in range(lo, up + 1):
                yield from walk(depth + 1, prefix + (x,))

        return walk(0, ())

    def _last_axis_intervals(self, prefix):
        """
        Inside and interior intervals of the last coordinate on a slice.

        Returns (lo, up, interior_lo, interior_up), or None if the slice is
        empty. The interior interval may be empty (interior_lo > interior_up).
        """
        last = self._dimension - 1
        lo, up = self._domain.lower_bound[last], self._domain.upper_bound[last]
        interior_lo, interior_up = lo, up
        for h in self._half_spaces:
            a = h.normal[last]
            r = h.offset - sum(h.normal[i] * prefix[i] for i in range(last))
            if a > 0:
                up = min(up, r // a)
                interior_up = min(interior_up, (r - 1) // a)
            elif a < 0:
                lo = max(lo, ceil_div(r, a))
                interior_lo = max(interior_lo, ceil_div(r - 1, a))
            elif r < 0:
                return None
            elif r == 0:
                interior_up = interior_lo - 1
        if lo > up:
            return None
        return lo, up, interior_lo, interior_up

    def _intervals(self):
        if self._empty or self._domain is None:
            return
        for prefix in self._prefixes():
            intervals = self._last_axis_intervals(prefix)
            if intervals is not None:
                yield (prefix,) + intervals

    def _enumerate(self, kind):
        self._check_valid()
        for prefix, lo, up, interior_lo, interior_up in self._intervals():
            if kind == _INSIDE:
                values = range(lo, up + 1)
            elif kind == _INTERIOR:
                values = range(interior_lo, interior_up + 1)
            elif interior_lo > interior_up:
                values = range(lo, up + 1)
            else:
                values = chain(range(lo, interior_lo), range(interior_up + 1, up + 1))
            for x in values:
                yield prefix + (x,)

    # ------------------------------------------------------------------
    # Counting and enumeration
    # ------------------------------------------------------------------

    def counts(self):
        """
        Count inside, interior and boundary points in a single pass.

        Returns:
        - tuple (inside, interior, boundary) with inside == interior + boundary.
        """
        self._check_valid()
        inside = interior = 0
        for _, lo, up, interior_lo, interior_up in self._intervals():
            inside += up - lo + 1
            if interior_up >= interior_lo:
                interior += interior_up - interior_lo + 1
        return inside, interior, inside - interior

    def count(self):
        """Number of lattice points inside the polytope."""
        return self.counts()[0]

    def count_interior(self):
        return self.counts()[1]

    def count_boundary(self):
        return self.counts()[2]

    def count_up_to(self, max_count):
        """Count inside points, stopping as soon as max_count is reached."""
        self._check_valid()
        total = 0
        for _, lo, up, _, _ in self._intervals():
            total += up - lo + 1
            if total >= max_count:
                return max_count
        return total

    def _collect(self, kind, out):
        points = list(self._enumerate(kind))
        if out is None:
            return points
        out.extend(points)
        return out

    def get_points(self, out=None):
        """
        Lattice points inside the polytope, in lexicographic order.

        Parameters:
        - out (list): optional list the points are appended to.
        """
        return self._collect(_INSIDE, out)

    def get_interior_points(self, out=None):
        return self._collect(_INTERIOR, out)

    def get_boundary_points(self, out=None):
        return self._collect(_BOUNDARY, out)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self):
        return (
            f"<BoundedLatticePolytope: dimension={self._dimension}, "
            f"half_spaces={len(self._half_spaces)}, valid={self.is_valid()}>"
        )

    def __str__(self):
        from ..utils.reporting import describe_polytope

        return describe_polytope(self)
