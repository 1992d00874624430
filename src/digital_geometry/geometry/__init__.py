"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Lattice polytopes and their building blocks.

This module contains:
- HalfSpace: canonical integer half-space
- Domain: axis-aligned lattice box
- BoundedLatticePolytope: exact lattice point counting and classification
- Convex hull facet and vertex enumeration
- Point classification predicates
- Pick's formula validation helpers

Dependencies: numpy
"""

from .half_space import HalfSpace
from .domain import Domain
from .classification import (
    PointClass,
    classify_point,
    classify_points,
    is_boundary,
    is_inside,
    is_interior,
)
from .convex_hull import (
    check_full_dimensional,
    facet_half_spaces,
    hull_vertices,
    unique_points,
)
from .vertex_enumeration import bounding_box, feasible_vertices, is_bounded
from .bounded_lattice_polytope import BoundedLatticePolytope
from .pick import (
    PickCheck,
    check_pick,
    convex_polygon,
    pick_area2,
    polygon_area2,
    simplex_volume,
)

__all__ = [
    'HalfSpace', 'Domain', 'BoundedLatticePolytope',
    'PointClass', 'classify_point', 'classify_points',
    'is_inside', 'is_boundary', 'is_interior',
    'facet_half_spaces', 'hull_vertices', 'unique_points', 'check_full_dimensional',
    'feasible_vertices', 'is_bounded', 'bounding_box',
    'PickCheck', 'check_pick', 'convex_polygon', 'pick_area2', 'polygon_area2',
    'simplex_volume',
]
