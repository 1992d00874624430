"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Builds the reference polytopes of config/polytopes.yaml, prints their
inequalities and lattice point counts, and checks Pick's formula on the
2D ones.
"""

import logging

from digital_geometry import BoundedLatticePolytope, Config
from digital_geometry.geometry import check_pick, hull_vertices
from digital_geometry.utils import describe_polytope

Config.configure_logging()
logger = logging.getLogger("polytope_report")

# Select the polytopes
# ==========================================
names = Config.list_polytopes()

for name in names:
    polytope = Config.build_polytope(name)
    print(f"{name}:")
    print(describe_polytope(polytope))

    if polytope.dimension == 2:
        # Pick's formula holds on the integer hull, not on a rational cut
        points = polytope.get_points()
        hull = BoundedLatticePolytope(vertices=points)
        result = check_pick(hull, hull_vertices(points))
        logger.info(
            "%s: 2A = %d, 2I + B - 2 = %d", name, result.area2, result.pick_area2
        )
        if not result.holds:
            logger.error("Pick's formula does not hold for %s", name)

    interior = polytope.interior_polytope()
    logger.info(
        "%s: interior polytope has %d points", name, interior.count()
    )
    print()
