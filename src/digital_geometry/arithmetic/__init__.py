"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Exact integer arithmetic.

This module contains:
- Integer point/vector helpers and exact determinants
- The Stern-Brocot tree of irreducible fractions
"""

from .integer_vector import (
    add,
    as_point,
    as_points,
    ceil_div,
    determinant,
    dot,
    gcd_of,
    norm2_squared,
    norm_inf,
    norm_l1,
    reduce_by_gcd,
    sub,
    to_array,
    to_integer,
)
from .stern_brocot import SternBrocot, SternBrocotFraction, fraction

__all__ = [
    'to_integer', 'as_point', 'as_points', 'add', 'sub', 'dot',
    'gcd_of', 'reduce_by_gcd', 'norm_l1', 'norm_inf', 'norm2_squared', 'ceil_div',
    'determinant', 'to_array',
    'SternBrocot', 'SternBrocotFraction', 'fraction',
]
