"""
Test suite for Cell.

Tests cover:
- Value equality and hashing
- Euclidean distance
- Neighbor tests (symmetry, self-exclusion)
- Diagonal tests
- Step costs
"""

import dataclasses
import math

import pytest
from gridwalk import DIAGONAL_STEP_COST, ORTHOGONAL_STEP_COST, Cell, step_cost

NEARBY = [Cell(x, y) for x in range(-2, 3) for y in range(-2, 3)]


class TestCellIdentity:
    """Test value semantics of cells."""

    def test_equal_coordinates_are_equal(self):
        assert Cell(3, 4) == Cell(3, 4)

    def test_different_coordinates_are_not_equal(self):
        assert Cell(3, 4) != Cell(4, 3)

    def test_hash_follows_coordinates(self):
        cells = {Cell(1, 1), Cell(1, 1), Cell(2, 1)}
        assert len(cells) == 2

    def test_coord_property(self):
        assert Cell(7, -2).coord == (7, -2)

    def test_cell_is_frozen(self):
        cell = Cell(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cell.x = 5


class TestCellDistance:
    """Test the straight-line distance heuristic."""

    def test_distance_to_self_is_zero(self):
        assert Cell(2, 2).distance_to(Cell(2, 2)) == 0.0

    def test_orthogonal_distance(self):
        assert Cell(0, 0).distance_to(Cell(0, 5)) == 5.0

    def test_pythagorean_distance(self):
        assert Cell(0, 0).distance_to(Cell(3, 4)) == 5.0

    def test_diagonal_distance(self):
        assert Cell(0, 0).distance_to(Cell(1, 1)) == pytest.approx(math.sqrt(2))

    def test_distance_is_symmetric(self):
        a, b = Cell(-1, 7), Cell(4, 2)
        assert a.distance_to(b) == b.distance_to(a)


class TestCellNeighbors:
    """Test lattice adjacency."""

    def test_orthogonal_cells_are_neighbors(self):
        center = Cell(0, 0)
        for other in (Cell(1, 0), Cell(-1, 0), Cell(0, 1), Cell(0, -1)):
            assert center.is_neighbor(other)

    def test_diagonal_cells_are_neighbors(self):
        center = Cell(0, 0)
        for other in (Cell(1, 1), Cell(-1, 1), Cell(1, -1), Cell(-1, -1)):
            assert center.is_neighbor(other)

    def test_cell_is_not_its_own_neighbor(self):
        for cell in NEARBY:
            assert not cell.is_neighbor(cell)

    def test_two_steps_away_is_not_neighbor(self):
        assert not Cell(0, 0).is_neighbor(Cell(2, 0))
        assert not Cell(0, 0).is_neighbor(Cell(2, 1))

    def test_neighbor_relation_is_symmetric(self):
        for a in NEARBY:
            for b in NEARBY:
                assert a.is_neighbor(b) == b.is_neighbor(a)

    def test_each_cell_has_eight_neighbors_in_lattice(self):
        center = Cell(0, 0)
        assert sum(1 for other in NEARBY if center.is_neighbor(other)) == 8


class TestCellDiagonal:
    """Test diagonal detection and step cost."""

    def test_diagonal_neighbor(self):
        assert Cell(1, 1).is_diagonal_from(Cell(2, 2))

    def test_orthogonal_neighbor_is_not_diagonal(self):
        assert not Cell(1, 1).is_diagonal_from(Cell(1, 2))

    def test_far_cell_is_not_diagonal(self):
        assert not Cell(0, 0).is_diagonal_from(Cell(2, 2))

    def test_diagonal_relation_is_symmetric(self):
        for a in NEARBY:
            for b in NEARBY:
                if a.is_neighbor(b):
                    assert a.is_diagonal_from(b) == b.is_diagonal_from(a)

    def test_step_cost_constants(self):
        assert ORTHOGONAL_STEP_COST == 1.0
        assert DIAGONAL_STEP_COST == 1.4

    def test_step_cost_orthogonal(self):
        assert step_cost(Cell(0, 0), Cell(0, 1)) == 1.0

    def test_step_cost_diagonal(self):
        assert step_cost(Cell(0, 0), Cell(1, 1)) == 1.4
