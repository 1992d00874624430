"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Utility functions for the digital_geometry library.
"""

from .reporting import describe_cell_geometry, describe_polytope

__all__ = [
    'describe_polytope',
    'describe_cell_geometry',
]
