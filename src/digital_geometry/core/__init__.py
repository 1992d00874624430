"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Core utilities and shared components for digital_geometry.

This module contains:
- Centralized configuration management
- The error taxonomy
"""

from .config import Config
from .exceptions import (
    DegenerateInputError,
    DigitalGeometryError,
    InvalidCellGeometry,
    InvalidHalfSpace,
    InvalidPolytopeState,
    UnboundedPolytopeError,
    UninitializedEstimatorError,
)

__all__ = [
    "Config",
    "DigitalGeometryError",
    "InvalidHalfSpace",
    "DegenerateInputError",
    "InvalidPolytopeState",
    "UnboundedPolytopeError",
    "InvalidCellGeometry",
    "UninitializedEstimatorError",
]
