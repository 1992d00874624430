"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from itertools import product

from ..arithmetic.integer_vector import as_point


class KhalimskySpace:
    """
    Cellular grid space over a box of lattice points.

    Cells are unsigned and identified by their Khalimsky coordinates: the
    pointel of the lattice point p has coordinates 2p, and a cell has
    dimension equal to its number of odd coordinates. Moving one step along
    an axis from an even coordinate reaches a cell of one more dimension.

    Parameters:
    - lower_bound: lowest lattice point of the space.
    - upper_bound: highest lattice point of the space.
    """

    def __init__(self, lower_bound, upper_bound):
        self.lower_bound = as_point(lower_bound)
        self.upper_bound = as_point(upper_bound, len(self.lower_bound))
        if any(lo > up for lo, up in zip(self.lower_bound, self.upper_bound)):
            raise ValueError(
                f"Lower bound {self.lower_bound} exceeds upper bound {self.upper_bound}"
            )

    @classmethod
    def from_domain(cls, domain):
        return cls(domain.lower_bound, domain.upper_bound)

    @property
    def dimension(self):
        return len(self.lower_bound)

    def pointel(self, point):
        """The 0-cell sitting on a lattice point."""
        return tuple(2 * c for c in as_point(point, self.dimension))

    def spel(self, point):
        """The top-dimensional cell whose lowest pointel sits on the point."""
        return tuple(2 * c + 1 for c in as_point(point, self.dimension))

    def point(self, cell):
        """Digital coordinates of a cell (its lowest incident pointel)."""
        return tuple(c // 2 for c in cell)

    def dim(self, cell):
        return sum(c & 1 for c in cell)

    def is_open(self, cell, axis):
        return cell[axis] & 1 == 1

    def is_inside(self, cell):
        if len(cell) != self.dimension:
            return False
        return all(
            2 * lo - 1 <= c <= 2 * up + 1
            for c, lo, up in zip(cell, self.lower_bound, self.upper_bound)
        )

    def incident(self, cell, axis, up):
        """The cell one step forward (up=True) or backward along an axis."""
        cell = list(cell)
        cell[axis] += 1 if up else -1
        return tuple(cell)

    def _neighbours(self, cell, axes):
        result = []
        for signs in product((-1, 0, 1), repeat=len(axes)):
            if all(s == 0 for s in signs):
                continue
            neighbour = list(cell)
            for axis, sign in zip(axes, signs):
                neighbour[axis] += sign
            result.append(tuple(neighbour))
        return result

    def cofaces(self, cell):
        """All cells having this cell as a proper face."""
        closed_axes = [i for i, c in enumerate(cell) if c & 1 == 0]
        return self._neighbours(cell, closed_axes)

    def faces(self, cell):
        """All proper faces of this cell."""
        open_axes = [i for i, c in enumerate(cell) if c & 1 == 1]
        return self._neighbours(cell, open_axes)

    def __repr__(self):
        return f"KhalimskySpace(lower_bound={self.lower_bound}, upper_bound={self.upper_bound})"
