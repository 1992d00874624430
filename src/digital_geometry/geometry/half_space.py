"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from ..arithmetic.integer_vector import (
    as_point,
    dot,
    gcd_of,
    is_zero,
    to_integer,
)
from ..core.exceptions import InvalidHalfSpace


class HalfSpace:
    """
    The lattice half-space {x : normal . x <= offset}.

    Half-spaces are immutable and always stored in canonical form: the normal
    is divided by the GCD g of its components and the offset becomes
    floor(offset / g). Both inequalities admit exactly the same lattice
    points, and keeping normals primitive stops offsets from growing across
    repeated cuts.

    When the normal has a single non-zero coordinate (necessarily +1 or -1
    once reduced) the half-space is axis-aligned and evaluation is a scalar
    comparison on that coordinate.
    """

    __slots__ = ("_normal", "_offset", "_axis")

    def __init__(self, normal, offset):
        normal = as_point(normal)
        offset = to_integer(offset)
        if is_zero(normal):
            raise InvalidHalfSpace(
                f"Half-space normal must be non-zero, got {normal}"
            )

        g = gcd_of(normal)
        if g > 1:
            normal = tuple(a // g for a in normal)
            offset = offset // g

        self._normal = normal
        self._offset = offset
        non_zero = [i for i, a in enumerate(normal) if a != 0]
        self._axis = non_zero[0] if len(non_zero) == 1 else None

    @classmethod
    def axis_aligned(cls, dimension, axis, positive, offset):
        """
        Build x_axis <= offset (positive=True) or -x_axis <= offset.

        Parameters:
        - dimension (int): dimension of the lattice space.
        - axis (int): coordinate index.
        - positive (bool): orientation of the normal.
        - offset (int): right-hand side.
        """
        if not 0 <= axis < dimension:
            raise ValueError(f"Axis {axis} out of range for dimension {dimension}")
        normal = [0] * dimension
        normal[axis] = 1 if positive else -1
        return cls(normal, offset)

    @property
    def normal(self):
        return self._normal

    @property
    def offset(self):
        return self._offset

    @property
    def dimension(self):
        return len(self._normal)

    @property
    def axis(self):
        """Index of the only non-zero normal coordinate, or None."""
        return self._axis

    def is_axis_aligned(self):
        return self._axis is not None

    def evaluate(self, point):
        """
        Return normal . point - offset on the stored canonical form.

        A value <= 0 means the point satisfies the half-space, and 0 means it
        lies on the supporting hyperplane. When the constructor arguments were
        not canonical the hyperplane is that of the reduced inequality: (2, 4)
        and 7 are stored as (1, 2) and 3, so (1, 1) evaluates to 0 although
        2 + 4 < 7.
        """
        if len(point) != len(self._normal):
            raise ValueError(
                f"Dimension mismatch: point has {len(point)} coordinates, "
                f"half-space has {len(self._normal)}"
            )
        if self._axis is not None:
            return self._normal[self._axis] * point[self._axis] - self._offset
        return dot(self._normal, point) - self._offset

    def contains(self, point):
        return self.evaluate(point) <= 0

    def strictly_contains(self, point):
        return self.evaluate(point) < 0

    def is_tight(self, point):
        """True iff the point lies on the supporting hyperplane."""
        return self.evaluate(point) == 0

    def shifted(self, delta):
        """Half-space with the same normal and offset decreased by delta."""
        return HalfSpace(self._normal, self._offset - delta)

    def __eq__(self, other):
        if not isinstance(other, HalfSpace):
            return NotImplemented
        return self._normal == other._normal and self._offset == other._offset

    def __hash__(self):
        return hash((self._normal, self._offset))

    def __repr__(self):
        return f"HalfSpace(normal={self._normal}, offset={self._offset})"

    def __str__(self):
        terms = []
        for i, a in enumerate(self._normal):
            if a == 0:
                continue
            coefficient = "" if abs(a) == 1 else str(abs(a))
            sign = "-" if a < 0 else "+"
            terms.append(f"{sign} {coefficient}x{i}")
        text = " ".join(terms)
        if text.startswith("+ "):
            text = text[2:]
        elif text.startswith("- "):
            text = "-" + text[2:]
        return f"{text} <= {self._offset}"
