"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Cell covers of lattice point sets.

A CellGeometry stores, for each dimension up to a maximum, the cells of a
Khalimsky space that touch a set of lattice points (i.e. whose closure
contains the pointel of one of the points).

Incident cells are computed through an explicit dispatch table. The
(cell dimension, space dimension) pairs listed in CellDimensionPair use a
precomputed table of Khalimsky offsets around a pointel; any other pair falls
back to filtering the cofaces of each pointel by dimension.
"""

import logging
from enum import Enum
from itertools import combinations, product

from ..arithmetic.integer_vector import add
from ..core.exceptions import InvalidCellGeometry

logger = logging.getLogger(__name__)


class CellDimensionPair(Enum):
    """(cell dimension, space dimension) pairs with a dedicated strategy."""

    LINELS_2D = (1, 2)
    PIXELS_2D = (2, 2)
    LINELS_3D = (1, 3)
    SURFELS_3D = (2, 3)
    VOXELS_3D = (3, 3)

    @classmethod
    def lookup(cls, cell_dim, space_dim):
        try:
            return cls((cell_dim, space_dim))
        except ValueError:
            return None


def _unit_offsets(cell_dim, space_dim):
    # every cell of dimension cell_dim incident to the pointel at the origin
    offsets = []
    for axes in combinations(range(space_dim), cell_dim):
        for signs in product((-1, 1), repeat=cell_dim):
            offset = [0] * space_dim
            for axis, sign in zip(axes, signs):
                offset[axis] = sign
            offsets.append(tuple(offset))
    return tuple(offsets)


_INCIDENT_OFFSETS = {pair: _unit_offsets(*pair.value) for pair in CellDimensionPair}


def _incident_from_table(pair, pointels):
    offsets = _INCIDENT_OFFSETS[pair]
    return {add(pointel, offset) for pointel in pointels for offset in offsets}


def _incident_generic(K, pointels, cell_dim):
    if cell_dim == 0:
        return set(pointels)
    return {
        cell
        for pointel in pointels
        for cell in K.cofaces(pointel)
        if K.dim(cell) == cell_dim
    }


def incident_cells_to_pointels(K, pointels, cell_dim):
    """
    Cells of dimension cell_dim incident to the given pointels.

    Args:
        K: KhalimskySpace holding the cells
        pointels: iterable of 0-cells (Khalimsky coordinates)
        cell_dim: dimension of the cells to return

    Returns:
        set of cells
    """
    if not 0 <= cell_dim <= K.dimension:
        raise ValueError(f"Cell dimension {cell_dim} out of range [0, {K.dimension}]")
    pair = CellDimensionPair.lookup(cell_dim, K.dimension)
    if pair is not None:
        return _incident_from_table(pair, pointels)
    return _incident_generic(K, list(pointels), cell_dim)


def incident_cells_to_points(K, points, cell_dim):
    """Cells of dimension cell_dim incident to the pointels of lattice points."""
    return incident_cells_to_pointels(K, [K.pointel(p) for p in points], cell_dim)


class CellGeometry:
    """
    Stores sets of cells touching lattice points, per cell dimension.

    Parameters:
    - K (KhalimskySpace): the cellular grid space.
    - max_cell_dim (int): highest cell dimension stored (defaults to the
      space dimension; dimension - 1 is enough for convexity checks).
    - verbose (bool): log progress at INFO level instead of DEBUG.
    """

    def __init__(self, K=None, max_cell_dim=None, verbose=False):
        self.K = None
        self.max_cell_dim = -1
        self.verbose = verbose
        self._cells = {}
        if K is not None:
            self.init(K, max_cell_dim, verbose)

    def init(self, K, max_cell_dim=None, verbose=False):
        """(Re)initialize from a cellular space. Stored cells are removed."""
        if max_cell_dim is None:
            max_cell_dim = K.dimension
        if not 0 <= max_cell_dim <= K.dimension:
            raise ValueError(
                f"max_cell_dim {max_cell_dim} out of range [0, {K.dimension}]"
            )
        self.K = K
        self.max_cell_dim = max_cell_dim
        self.verbose = verbose
        self._cells = {dim: set() for dim in range(max_cell_dim + 1)}

    def _log(self, message, *args):
        if self.verbose:
            logger.info(message, *args)
        else:
            logger.debug(message, *args)

    def is_valid(self):
        return self.K is not None

    @property
    def dimension(self):
        return self.K.dimension if self.K is not None else None

    def _check_valid(self):
        if self.K is None:
            raise InvalidCellGeometry("CellGeometry has not been initialized with a space")

    def add_cells_touching_pointels(self, pointels):
        self._check_valid()
        pointels = list(pointels)
        for dim in range(self.max_cell_dim + 1):
            self._cells[dim] |= incident_cells_to_pointels(self.K, pointels, dim)
        self._log("Added cells touching %d pointels", len(pointels))

    def add_cells_touching_points(self, points):
        self._check_valid()
        self.add_cells_touching_pointels(self.K.pointel(p) for p in points)

    def add_cells_touching_polytope_points(self, polytope):
        """Add the cells touching every lattice point of a polytope."""
        self._check_valid()
        if polytope.dimension != self.K.dimension:
            raise ValueError("Polytope and cellular space have different dimensions")
        points = polytope.get_points()
        self._log("Polytope has %d lattice points", len(points))
        self.add_cells_touching_points(points)

    def set_points(self, points):
        """Initialize the cell cover from a set of lattice points."""
        self.init(self.K, self.max_cell_dim, self.verbose)
        self.add_cells_touching_points(points)

    def set_pointels(self, pointels):
        """Initialize the cell cover from a set of pointels."""
        self.init(self.K, self.max_cell_dim, self.verbose)
        self.add_cells_touching_pointels(pointels)

    def cells(self, dim):
        return frozenset(self._cells.get(dim, ()))

    def nb_cells(self, dim):
        return len(self._cells.get(dim, ()))

    def compute_euler(self):
        """Alternating sum of the number of stored cells per dimension."""
        return sum((-1) ** dim * len(cells) for dim, cells in self._cells.items())

    def subset(self, other):
        """True iff every stored cell of this cover is stored in other."""
        return all(
            cells <= other._cells.get(dim, set())
            for dim, cells in self._cells.items()
        )

    def __contains__(self, cell):
        self._check_valid()
        return cell in self._cells.get(self.K.dim(cell), ())

    def __str__(self):
        from ..utils.reporting import describe_cell_geometry

        if not self.is_valid():
            return "[CellGeometry invalid]"
        return describe_cell_geometry(self)
