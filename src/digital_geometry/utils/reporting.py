"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Human-readable dumps of polytopes and cell covers.

The output is a textual listing meant for logs, test failure messages and
example scripts. It is not a stable file format.
"""


def describe_polytope(polytope, with_counts=True):
    """
    Describe a polytope: dimension, domain, inequalities and point counts.

    Parameters:
    - polytope (BoundedLatticePolytope): any polytope, valid or not.
    - with_counts (bool): also enumerate and report lattice point counts.

    Returns:
    - str: multi-line description.
    """
    if polytope.dimension is None:
        return "[BoundedLatticePolytope invalid (not initialized)]"

    lines = [
        f"[BoundedLatticePolytope dimension={polytope.dimension} "
        f"#half_spaces={polytope.nb_half_spaces()} valid={polytope.is_valid()}]"
    ]
    domain = polytope.domain
    if domain is not None:
        lines.append(f"  domain: {domain.lower_bound} .. {domain.upper_bound}")
    else:
        lines.append("  domain: none")
    for index, half_space in enumerate(polytope.half_spaces):
        lines.append(f"  [{index}] {half_space}")

    if with_counts and polytope.is_valid():
        inside, interior, boundary = polytope.counts()
        lines.append(f"  #inside={inside} #interior={interior} #boundary={boundary}")
    return "\n".join(lines)


def describe_cell_geometry(cell_geometry):
    """One line per cell dimension with the number of stored cells."""
    lines = [
        f"[CellGeometry dimension={cell_geometry.dimension} "
        f"max_cell_dim={cell_geometry.max_cell_dim}]"
    ]
    for dim in range(cell_geometry.max_cell_dim + 1):
        lines.append(f"  #{dim}-cells={cell_geometry.nb_cells(dim)}")
    lines.append(f"  euler={cell_geometry.compute_euler()}")
    return "\n".join(lines)
