"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Unit tests for Khalimsky spaces and cell covers of lattice points.

The cells touching a box or a triangle of lattice points form an open ball,
whose Euler characteristic is 1 in 2D and -1 in 3D.
"""

import pytest

from digital_geometry import BoundedLatticePolytope, DigitalGeometryError, InvalidCellGeometry
from digital_geometry.topology import (
    CellDimensionPair,
    CellGeometry,
    KhalimskySpace,
    incident_cells_to_points,
)


@pytest.fixture
def K2():
    return KhalimskySpace((0, 0), (10, 10))


@pytest.fixture
def K3():
    return KhalimskySpace((0, 0, 0), (10, 10, 10))


# ----------------------------------------------------------------------
# KhalimskySpace
# ----------------------------------------------------------------------


def test_pointel_and_spel(K2):
    pointel = K2.pointel((1, 2))
    assert pointel == (2, 4)
    assert K2.dim(pointel) == 0
    spel = K2.spel((1, 2))
    assert spel == (3, 5)
    assert K2.dim(spel) == 2
    assert K2.point(spel) == (1, 2)
    assert K2.point(pointel) == (1, 2)


def test_incident_and_openness(K2):
    linel = K2.incident((2, 4), 0, True)
    assert linel == (3, 4)
    assert K2.dim(linel) == 1
    assert K2.is_open(linel, 0)
    assert not K2.is_open(linel, 1)
    assert K2.incident(linel, 0, False) == (2, 4)


def test_faces_and_cofaces(K2, K3):
    assert len(K2.cofaces((2, 4))) == 8
    assert len(K2.faces((3, 5))) == 8
    assert sorted(K2.faces((3, 4))) == [(2, 4), (4, 4)]
    assert len(K3.cofaces((2, 2, 2))) == 26
    for cell in K3.cofaces((2, 2, 2)):
        assert (2, 2, 2) in K3.faces(cell), f"{cell} should have the pointel as face"


def test_is_inside(K2):
    assert K2.is_inside((-1, -1))
    assert K2.is_inside((21, 20))
    assert not K2.is_inside((-2, 0))
    assert not K2.is_inside((0, 0, 0))


def test_invalid_bounds():
    with pytest.raises(ValueError):
        KhalimskySpace((0, 3), (1, 2))


# ----------------------------------------------------------------------
# Incident cells
# ----------------------------------------------------------------------


def test_cell_dimension_pair_lookup():
    assert CellDimensionPair.lookup(1, 2) is CellDimensionPair.LINELS_2D
    assert CellDimensionPair.lookup(3, 3) is CellDimensionPair.VOXELS_3D
    assert CellDimensionPair.lookup(2, 4) is None
    assert CellDimensionPair.lookup(0, 2) is None


@pytest.mark.parametrize("cell_dim, expected", [(0, 1), (1, 6), (2, 12), (3, 8)])
def test_incident_cells_of_one_point_3d(K3, cell_dim, expected):
    cells = incident_cells_to_points(K3, [(1, 1, 1)], cell_dim)
    assert len(cells) == expected
    assert all(K3.dim(c) == cell_dim for c in cells)


@pytest.mark.parametrize("cell_dim", [1, 2, 3])
def test_table_strategy_matches_cofaces(K3, cell_dim):
    points = [(1, 1, 1), (2, 1, 1), (2, 2, 3)]
    expected = {
        c
        for p in points
        for c in K3.cofaces(K3.pointel(p))
        if K3.dim(c) == cell_dim
    }
    assert incident_cells_to_points(K3, points, cell_dim) == expected


def test_generic_strategy_in_4d():
    K4 = KhalimskySpace((0,) * 4, (3,) * 4)
    cells = incident_cells_to_points(K4, [(1, 1, 1, 1)], 2)
    assert len(cells) == 24, "C(4, 2) * 2^2 squares touch a pointel in 4D"
    with pytest.raises(ValueError):
        incident_cells_to_points(K4, [(1, 1, 1, 1)], 5)


# ----------------------------------------------------------------------
# CellGeometry
# ----------------------------------------------------------------------


def test_single_point_euler(K2, K3):
    cg2 = CellGeometry(K2, 2)
    cg2.add_cells_touching_points([(1, 1)])
    assert [cg2.nb_cells(d) for d in range(3)] == [1, 4, 4]
    assert cg2.compute_euler() == 1

    cg3 = CellGeometry(K3, 3)
    cg3.add_cells_touching_points([(1, 1, 1)])
    assert [cg3.nb_cells(d) for d in range(4)] == [1, 6, 12, 8]
    assert cg3.compute_euler() == -1


def test_two_adjacent_points(K2):
    cg = CellGeometry(K2, 2)
    cg.add_cells_touching_points([(1, 1), (2, 1)])
    assert [cg.nb_cells(d) for d in range(3)] == [2, 7, 6]
    assert cg.compute_euler() == 1


def test_max_cell_dim_limits_storage(K2):
    cg = CellGeometry(K2, 1)
    cg.add_cells_touching_points([(1, 1)])
    assert cg.nb_cells(2) == 0
    assert cg.cells(2) == frozenset()
    assert cg.compute_euler() == 1 - 4


def test_polytope_cover_euler():
    P = BoundedLatticePolytope(vertices=[(0, 0), (5, 0), (0, 7)])
    K = KhalimskySpace.from_domain(P.domain)
    cg = CellGeometry(K, 2, verbose=True)
    cg.add_cells_touching_polytope_points(P)
    assert cg.nb_cells(0) == P.count()
    assert cg.compute_euler() == 1

    cube = [(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)]
    S = BoundedLatticePolytope(vertices=cube).dilate(2)
    cg3 = CellGeometry(KhalimskySpace.from_domain(S.domain), 3)
    cg3.add_cells_touching_polytope_points(S)
    assert [cg3.nb_cells(d) for d in range(4)] == [27, 108, 144, 64]
    assert cg3.compute_euler() == -1


def test_polytope_dimension_mismatch(K3):
    P = BoundedLatticePolytope(vertices=[(0, 0), (5, 0), (0, 7)])
    with pytest.raises(ValueError):
        CellGeometry(K3).add_cells_touching_polytope_points(P)


def test_subset_and_contains(K2):
    small = CellGeometry(K2, 2)
    small.set_points([(1, 1)])
    large = CellGeometry(K2, 2)
    large.set_pointels([K2.pointel((1, 1)), K2.pointel((2, 1))])
    assert small.subset(large)
    assert not large.subset(small)
    assert (3, 3) in small
    assert (5, 3) not in small
    assert (5, 3) in large


def test_set_points_resets(K2):
    cg = CellGeometry(K2, 2)
    cg.set_points([(1, 1), (5, 5)])
    cg.set_points([(1, 1)])
    assert cg.nb_cells(0) == 1


def test_uninitialized_cell_geometry(K2):
    cg = CellGeometry()
    assert not cg.is_valid()
    assert str(cg) == "[CellGeometry invalid]"
    with pytest.raises(InvalidCellGeometry):
        cg.add_cells_touching_points([(0, 0)])
    with pytest.raises(DigitalGeometryError):
        (0, 0) in cg
    with pytest.raises(ValueError):
        CellGeometry(K2, 3)


def test_str(K2):
    cg = CellGeometry(K2, 2)
    cg.set_points([(1, 1)])
    text = str(cg)
    assert "#1-cells=4" in text
    assert "euler=1" in text
