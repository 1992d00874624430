"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Error taxonomy shared by the lattice polytope engine.

All errors are programmer or input errors: they are raised immediately and
never retried.
"""


class DigitalGeometryError(Exception):
    """Base class of all errors raised by digital_geometry."""


class InvalidHalfSpace(DigitalGeometryError, ValueError):
    """A half-space was given a zero normal vector."""


class DegenerateInputError(DigitalGeometryError, ValueError):
    """A point set does not span a full-dimensional bounded region."""


class InvalidPolytopeState(DigitalGeometryError, RuntimeError):
    """An operation was invoked on a polytope for which is_valid() is False."""


class UnboundedPolytopeError(InvalidPolytopeState):
    """The half-space system does not define a bounded region."""


class InvalidCellGeometry(DigitalGeometryError, RuntimeError):
    """A cell cover was used before being initialized with a cellular space."""


class UninitializedEstimatorError(DigitalGeometryError, RuntimeError):
    """A curve estimator was evaluated before init() gave it a curve."""
