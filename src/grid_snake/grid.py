"""Grid representation for the snake game."""

from __future__ import annotations

import enum

import numpy as np

from grid_snake.snake import Position


class CellType(enum.IntEnum):
    """Integer codes for grid cells.

    ``OUTSIDE`` is only produced as a collision result and is never stored
    in the grid array.
    """

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    OUTSIDE = 3


class Grid:
    """NumPy-backed game grid.

    The grid stores cell states as integers for O(1) collision checks.
    Coordinates use (row, col) ordering consistent with NumPy indexing.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("Grid dimensions must be positive.")
        self.rows = rows
        self.cols = cols
        self.cells = np.zeros((rows, cols), dtype=np.int8)

    def in_bounds(self, pos: tuple[int, int]) -> bool:
        """Check whether a coordinate lies within the grid."""
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, pos: tuple[int, int]) -> CellType:
        """Return the cell type at the given coordinate."""
        self._check_bounds(pos)
        return CellType(self.cells[pos[0], pos[1]])

    def set(self, pos: tuple[int, int], cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        if cell_type == CellType.OUTSIDE:
            raise ValueError("OUTSIDE cannot be stored in the grid.")
        self._check_bounds(pos)
        self.cells[pos[0], pos[1]] = cell_type

    def empty_cells(self) -> list[Position]:
        """Return all empty cell coordinates in row-major order."""
        rows, cols = np.where(self.cells == CellType.EMPTY)
        return [
            Position(r, c)
            for r, c in zip(rows.tolist(), cols.tolist(), strict=True)
        ]

    def count(self, cell_type: CellType) -> int:
        """Count cells holding *cell_type*."""
        return int(np.count_nonzero(self.cells == cell_type))

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cells": self.cells.tolist(),
        }

    def _check_bounds(self, pos: tuple[int, int]) -> None:
        # NumPy would silently wrap negative indices.
        if not self.in_bounds(pos):
            raise IndexError(
                f"Position {tuple(pos)} is outside a "
                f"{self.rows}x{self.cols} grid."
            )
