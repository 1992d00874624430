"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Online recognition of 4-connected digital straight segments.

A standard (4-connected) digital straight line of slope a/b and intercept mu
is the set of lattice points (x, y) with

    mu <= a x - b y < mu + |a| + |b|

and a DSS is a 4-connected piece of such a line. The recognizer grows a
segment one point at a time at either end and keeps (a, b, mu) up to date
with the Debled-Rennesson update on leaning points: points whose remainder
a x - b y equals mu (upper) or mu + omega - 1 (lower).
"""

from collections import deque

from ..arithmetic.integer_vector import as_point, norm_l1, sub


class ArithmeticDSS4:
    """
    Standard digital straight segment recognized point by point.

    The direction vector of the segment is (b, a) and its thickness is
    omega = |a| + |b|, the L1 norm of the direction. Consecutive points must
    be 4-adjacent and a segment uses at most two step directions, which are
    never opposite.

    Parameters:
    - first_point: first point of the segment.
    - second_point: a 4-neighbour of first_point.
    """

    def __init__(self, first_point, second_point):
        first_point = as_point(first_point, 2)
        second_point = as_point(second_point, 2)
        step = sub(second_point, first_point)
        if self.norm(*step) != 1:
            raise ValueError(
                f"Points {first_point} and {second_point} are not 4-adjacent"
            )
        self._points = deque([first_point, second_point])
        self._steps = {step}
        self._set_direction(step, first_point)
        self._upper_first = self._lower_first = first_point
        self._upper_last = self._lower_last = second_point

    @staticmethod
    def norm(x, y):
        """L1 norm, which measures steps and thickness of 4-connected lines."""
        return norm_l1((x, y))

    def _set_direction(self, vector, upper_point):
        self._b, self._a = vector
        self._mu = self.remainder(upper_point)
        self._omega = self.norm(self._a, self._b)

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def mu(self):
        return self._mu

    @property
    def omega(self):
        return self._omega

    @property
    def direction(self):
        return (self._b, self._a)

    @property
    def back(self):
        return self._points[0]

    @property
    def front(self):
        return self._points[-1]

    @property
    def points(self):
        return tuple(self._points)

    @property
    def upper_leaning_points(self):
        """First and last points with remainder mu."""
        return self._upper_first, self._upper_last

    @property
    def lower_leaning_points(self):
        """First and last points with remainder mu + omega - 1."""
        return self._lower_first, self._lower_last

    def remainder(self, point):
        return self._a * point[0] - self._b * point[1]

    def in_line(self, point):
        """True iff the point belongs to the digital line of the segment."""
        r = self.remainder(point)
        return self._mu <= r < self._mu + self._omega

    def _accepts_step(self, step):
        if self.norm(*step) != 1:
            return False
        steps = self._steps | {step}
        if len(steps) > 2:
            return False
        return (-step[0], -step[1]) not in steps

    def _remainder_fits(self, point):
        r = self.remainder(point)
        return self._mu - 1 <= r <= self._mu + self._omega

    def is_extendable_front(self, point):
        point = as_point(point, 2)
        return self._accepts_step(sub(point, self.front)) and self._remainder_fits(point)

    def is_extendable_back(self, point):
        point = as_point(point, 2)
        return self._accepts_step(sub(self.back, point)) and self._remainder_fits(point)

    def extend_front(self, point):
        """
        Add a point after the front of the segment if the result is a DSS.

        Returns:
            True if the point was added, False otherwise (segment unchanged)
        """
        point = as_point(point, 2)
        if not self.is_extendable_front(point):
            return False
        r = self.remainder(point)
        if r == self._mu - 1:
            self._set_direction(sub(point, self._upper_first), self._upper_first)
            self._upper_last = point
            self._lower_first = self._lower_last
        elif r == self._mu + self._omega:
            self._upper_first = self._upper_last
            self._set_direction(sub(point, self._lower_first), self._upper_first)
            self._lower_last = point
        else:
            if r == self._mu:
                self._upper_last = point
            if r == self._mu + self._omega - 1:
                self._lower_last = point
        self._steps.add(sub(point, self.front))
        self._points.append(point)
        return True

    def extend_back(self, point):
        """
        Add a point before the back of the segment if the result is a DSS.

        Returns:
            True if the point was added, False otherwise (segment unchanged)
        """
        point = as_point(point, 2)
        if not self.is_extendable_back(point):
            return False
        r = self.remainder(point)
        if r == self._mu - 1:
            self._set_direction(sub(self._upper_last, point), point)
            self._upper_first = point
            self._lower_last = self._lower_first
        elif r == self._mu + self._omega:
            self._upper_last = self._upper_first
            self._set_direction(sub(self._lower_last, point), self._upper_first)
            self._lower_first = point
        else:
            if r == self._mu:
                self._upper_first = point
            if r == self._mu + self._omega - 1:
                self._lower_first = point
        self._steps.add(sub(self.back, point))
        self._points.appendleft(point)
        return True

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __contains__(self, point):
        return tuple(point) in self._points

    def __repr__(self):
        return (
            f"ArithmeticDSS4(a={self._a}, b={self._b}, mu={self._mu}, "
            f"back={self.back}, front={self.front})"
        )
