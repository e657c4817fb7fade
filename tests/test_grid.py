"""Tests for the Grid module."""

import numpy as np
import pytest

from grid_snake.grid import CellType, Grid


class TestGridInit:
    def test_dimensions(self):
        grid = Grid(8, 10)
        assert grid.rows == 8
        assert grid.cols == 10
        assert grid.cells.shape == (8, 10)

    def test_all_cells_start_empty(self):
        grid = Grid(5, 5)
        assert np.all(grid.cells == CellType.EMPTY)

    def test_non_positive_dimensions(self):
        with pytest.raises(ValueError, match="positive"):
            Grid(0, 5)
        with pytest.raises(ValueError, match="positive"):
            Grid(5, -1)


class TestGridOperations:
    def test_set_and_get(self):
        grid = Grid(5, 5)
        grid.set((2, 3), CellType.SNAKE)
        assert grid.get((2, 3)) == CellType.SNAKE

    def test_in_bounds(self):
        grid = Grid(5, 5)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((4, 4))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, 5))
        assert not grid.in_bounds((5, 0))

    def test_negative_index_does_not_wrap(self):
        grid = Grid(5, 5)
        grid.set((4, 4), CellType.FOOD)
        with pytest.raises(IndexError):
            grid.get((-1, -1))

    def test_outside_is_never_stored(self):
        grid = Grid(5, 5)
        with pytest.raises(ValueError, match="OUTSIDE"):
            grid.set((0, 0), CellType.OUTSIDE)

    def test_empty_cells(self):
        grid = Grid(4, 4)
        assert len(grid.empty_cells()) == 16
        grid.set((0, 0), CellType.SNAKE)
        grid.set((1, 1), CellType.FOOD)
        empty = grid.empty_cells()
        assert len(empty) == 14
        assert (0, 0) not in empty
        assert (1, 1) not in empty

    def test_count(self):
        grid = Grid(4, 4)
        grid.set((0, 0), CellType.SNAKE)
        grid.set((0, 1), CellType.SNAKE)
        grid.set((3, 3), CellType.FOOD)
        assert grid.count(CellType.SNAKE) == 2
        assert grid.count(CellType.FOOD) == 1
        assert grid.count(CellType.EMPTY) == 13


class TestGridSerialization:
    def test_to_dict_reflects_state(self):
        grid = Grid(4, 5)
        grid.set((1, 2), CellType.FOOD)
        d = grid.to_dict()
        assert d["rows"] == 4
        assert d["cols"] == 5
        assert len(d["cells"]) == 4
        assert len(d["cells"][0]) == 5
        assert d["cells"][1][2] == CellType.FOOD
