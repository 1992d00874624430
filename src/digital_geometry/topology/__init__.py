"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Cellular grid spaces and cell covers.

This module contains:
- KhalimskySpace: cells addressed by Khalimsky coordinates
- CellGeometry: cells touching a set of lattice points
"""

from .khalimsky import KhalimskySpace
from .cell_geometry import (
    CellDimensionPair,
    CellGeometry,
    incident_cells_to_pointels,
    incident_cells_to_points,
)

__all__ = [
    'KhalimskySpace', 'CellGeometry', 'CellDimensionPair',
    'incident_cells_to_pointels', 'incident_cells_to_points',
]
