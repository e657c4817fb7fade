"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.grid import CellType

if TYPE_CHECKING:
    from grid_snake.grid import Grid
    from grid_snake.snake import Position

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a uniformly random empty cell.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self) -> Position | None:
        """Place one food item and return its position.

        Returns ``None`` without touching the grid when no empty cell is
        left.
        """
        empty = self.grid.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food spawning.")
            return None

        pos = empty[int(self.rng.integers(len(empty)))]
        self.grid.set(pos, CellType.FOOD)
        logger.debug("Food placed at %s.", pos)
        return pos
