"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Digital Geometry - exact algorithms on integer lattices.

The package is organized into focused submodules:
- arithmetic: Integer points/vectors, exact determinants, Stern-Brocot tree
- geometry: Half-spaces, domains and bounded lattice polytopes
- topology: Khalimsky spaces and cell covers
- curves: Digital straight segments and maximal segment estimators
- utils: Reporting helpers
"""

# Version information
__version__ = "0.1.0"
__author__ = "Cem Bilaloglu"
__email__ = "cem.bilaloglu@idiap.ch"
__license__ = "MIT"

from .core import (
    Config,
    DegenerateInputError,
    DigitalGeometryError,
    InvalidCellGeometry,
    InvalidHalfSpace,
    InvalidPolytopeState,
    UnboundedPolytopeError,
    UninitializedEstimatorError,
)
from .arithmetic import SternBrocot, SternBrocotFraction
from .geometry import (
    BoundedLatticePolytope,
    Domain,
    HalfSpace,
    PointClass,
)
from .topology import CellGeometry, KhalimskySpace
from .curves import ArithmeticDSS4, MostCenteredMaximalSegmentEstimator

_CORE_IMPORTS = [
    "Config", "DigitalGeometryError", "InvalidHalfSpace",
    "DegenerateInputError", "InvalidPolytopeState", "UnboundedPolytopeError",
    "InvalidCellGeometry", "UninitializedEstimatorError",
]
_ARITHMETIC_IMPORTS = ["SternBrocot", "SternBrocotFraction"]
_GEOMETRY_IMPORTS = ["BoundedLatticePolytope", "Domain", "HalfSpace", "PointClass"]
_TOPOLOGY_IMPORTS = ["CellGeometry", "KhalimskySpace"]
_CURVES_IMPORTS = ["ArithmeticDSS4", "MostCenteredMaximalSegmentEstimator"]

__all__ = (
    _CORE_IMPORTS + _ARITHMETIC_IMPORTS + _GEOMETRY_IMPORTS
    + _TOPOLOGY_IMPORTS + _CURVES_IMPORTS
)

# Provide easy access to submodules
from . import core
from . import arithmetic
from . import geometry
from . import topology
from . import curves
from . import utils
