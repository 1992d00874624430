"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Maximal segments of open digital curves and estimators built on them.

A segment computer is any callable taking the first two points of a segment
and returning an object whose extend_front(point) method grows the segment
and returns False once the point cannot be added. ArithmeticDSS4 is one.

A functor is any callable functor(point, segment, h) returning the quantity
estimated at a point from a segment and the grid step h.
"""

import logging
import math
from collections import namedtuple

import numpy as np

from ..arithmetic.integer_vector import as_points
from ..core.exceptions import UninitializedEstimatorError
from .arithmetic_dss import ArithmeticDSS4

logger = logging.getLogger(__name__)

MaximalSegment = namedtuple("MaximalSegment", ["start", "end", "segment"])


def longest_segment(points, start, segment_computer=ArithmeticDSS4):
    """
    Grow a segment from points[start] as far as possible.

    Returns:
        (end, segment) where end is the index after the last point taken
    """
    segment = segment_computer(points[start], points[start + 1])
    end = start + 2
    while end < len(points) and segment.extend_front(points[end]):
        end += 1
    return end, segment


def maximal_segments(points, segment_computer=ArithmeticDSS4):
    """
    Compute the maximal segments of an open curve.

    A segment [start, end) is maximal when it can be extended neither at its
    front nor at its back. Segments are returned by increasing start.

    Parameters:
    - points: sequence of at least two points, consecutive points adjacent
      in the sense of the segment computer.
    - segment_computer: callable building a segment from its first two points.

    Returns:
    - list of MaximalSegment(start, end, segment).
    """
    points = as_points(points)
    if len(points) < 2:
        raise ValueError("A curve needs at least two points")

    segments = []
    last_end = 0
    for start in range(len(points) - 1):
        end, segment = longest_segment(points, start, segment_computer)
        if end > last_end:
            segments.append(MaximalSegment(start, end, segment))
            last_end = end
        if end == len(points):
            break
    logger.debug(
        "Curve of %d points has %d maximal segments", len(points), len(segments)
    )
    return segments


def tangent_angle(point, segment, h=1.0):
    """Angle of the segment direction with the x axis, in radians."""
    return math.atan2(segment.a, segment.b)


def tangent_vector(point, segment, h=1.0):
    """Unit direction vector of the segment."""
    v = np.array([segment.b, segment.a], dtype=float)
    return v / np.linalg.norm(v)


def normal_vector(point, segment, h=1.0):
    """Unit vector obtained by rotating the tangent a quarter turn counterclockwise."""
    v = np.array([-segment.a, segment.b], dtype=float)
    return v / np.linalg.norm(v)


class MostCenteredMaximalSegmentEstimator:
    """
    Estimates a quantity at each point of a curve from its most centered
    maximal segment.

    Among the maximal segments containing a point, the most centered one is
    the one whose middle is the closest to the point along the curve; ties
    go to the segment starting first.

    Parameters:
    - segment_computer: callable building a segment from its first two
      points, e.g. ArithmeticDSS4.
    - functor: callable functor(point, segment, h) computing the quantity,
      e.g. tangent_angle.
    """

    def __init__(self, segment_computer, functor):
        self.segment_computer = segment_computer
        self.functor = functor
        self.h = None
        self._points = None
        self._segments = None

    def init(self, h, points):
        """
        Set the grid step and the curve, and compute its maximal segments.

        Args:
            h: grid step, must be > 0
            points: open curve as a sequence of adjacent points
        """
        if h <= 0:
            raise ValueError(f"Grid step must be positive, got {h}")
        self.h = h
        self._points = as_points(points)
        self._segments = maximal_segments(self._points, self.segment_computer)

    def is_valid(self):
        return self._segments is not None

    @property
    def segments(self):
        self._check_valid()
        return list(self._segments)

    def _check_valid(self):
        if self._segments is None:
            raise UninitializedEstimatorError("Estimator has not been initialized with a curve")

    def most_centered_segment(self, index):
        """The most centered maximal segment containing points[index]."""
        self._check_valid()
        if not 0 <= index < len(self._points):
            raise IndexError(f"Point index {index} out of range")
        best, best_distance = None, None
        for s in self._segments:
            if s.start > index:
                break
            if index >= s.end:
                continue
            # twice the distance between the point and the segment middle
            distance = abs(s.start + s.end - 1 - 2 * index)
            if best is None or distance < best_distance:
                best, best_distance = s, distance
        return best

    def eval_at(self, index):
        """Estimated quantity at points[index]."""
        segment = self.most_centered_segment(index).segment
        return self.functor(self._points[index], segment, self.h)

    def eval(self, begin=0, end=None):
        """Estimated quantities at points[begin:end]."""
        self._check_valid()
        if end is None:
            end = len(self._points)
        return [self.eval_at(i) for i in range(begin, end)]
