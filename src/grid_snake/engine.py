"""Tick-based game state composing grid, snake, food, and input buffering."""

from __future__ import annotations

import logging

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.direction_buffer import DirectionBuffer
from grid_snake.food import FoodSpawner
from grid_snake.grid import CellType, Grid
from grid_snake.snake import Direction, Position, Snake

logger = logging.getLogger(__name__)

INITIAL_LENGTH = 3


class GameState:
    """Single-snake game state.

    Owns the grid, the snake body, the pending-direction buffer, the score,
    and the game-over flag. The grid and the body are kept in step by every
    mutation: each cell marked ``SNAKE`` is exactly one body segment.

    Hosts call :meth:`change_direction` on input events and :meth:`move`
    once per tick, then read the queries to draw the frame.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        *,
        seed: int | None = None,
        direction_buffer_size: int = 2,
    ) -> None:
        self.config = GameConfig(
            rows=rows,
            cols=cols,
            direction_buffer_size=direction_buffer_size,
            seed=seed,
        )
        self.rows = rows
        self.cols = cols
        self._grid = Grid(rows, cols)
        self.rng = np.random.default_rng(seed)

        start_row = rows // 2
        # Head-first: columns 3, 2, 1 of the middle row.
        self.snake = Snake(
            (start_row, col) for col in range(INITIAL_LENGTH, 0, -1)
        )
        for pos in self.snake:
            self._grid.set(pos, CellType.SNAKE)

        self.direction = Direction.RIGHT
        self._buffer = DirectionBuffer(direction_buffer_size)
        self.food_spawner = FoodSpawner(self._grid, rng=self.rng)
        self.food_spawner.spawn()

        self.tick = 0
        self._score = 0
        self._game_over = False

    @classmethod
    def from_config(cls, config: GameConfig) -> GameState:
        return cls(
            config.rows,
            config.cols,
            seed=config.seed,
            direction_buffer_size=config.direction_buffer_size,
        )

    # --- queries ---

    @property
    def score(self) -> int:
        return self._score

    @property
    def game_over(self) -> bool:
        """True once the snake has hit a wall or itself. Never resets."""
        return self._game_over

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the cell array, indexed ``[row, col]``."""
        view = self._grid.cells.view()
        view.flags.writeable = False
        return view

    @property
    def food(self) -> Position | None:
        """Return the current food position, or None on a full board."""
        found = np.argwhere(self._grid.cells == CellType.FOOD)
        if len(found) == 0:
            return None
        r, c = found[0].tolist()
        return Position(r, c)

    def head_position(self) -> Position:
        return self.snake.head

    def tail_position(self) -> Position:
        return self.snake.tail

    def snake_positions(self) -> tuple[Position, ...]:
        """Return the full body, head first."""
        return tuple(self.snake)

    def cell(self, row: int, col: int) -> CellType:
        """Return the stored value of a grid cell."""
        return self._grid.get((row, col))

    def pending_directions(self) -> list[Direction]:
        return self._buffer.to_list()

    # --- mutators ---

    def change_direction(self, direction: Direction) -> bool:
        """Request a turn that takes effect on a later :meth:`move`.

        Rejected requests are dropped silently; the return value only
        reports whether the request was queued.
        """
        if self._game_over:
            return False
        return self._buffer.offer(direction, self.direction)

    def move(self) -> None:
        """Advance the game by one tick. Does nothing after game over."""
        if self._game_over:
            return

        queued = self._buffer.pop()
        if queued is not None:
            self.direction = queued

        new_head = self.snake.head.translate(self.direction)
        hit = self.will_hit(new_head)

        if hit in (CellType.OUTSIDE, CellType.SNAKE):
            self._end_game(new_head, hit)
            return

        if hit == CellType.EMPTY:
            self._remove_tail()
            self._add_head(new_head)
        elif hit == CellType.FOOD:
            self._add_head(new_head)
            self._score += 1
            self.food_spawner.spawn()

        self.tick += 1

    def will_hit(self, pos: Position) -> CellType:
        """Classify what the head would run into at *pos*.

        The tail cell counts as empty because the tail leaves it on the
        same tick.
        """
        if not self._grid.in_bounds(pos):
            return CellType.OUTSIDE
        if pos == self.snake.tail:
            return CellType.EMPTY
        return self._grid.get(pos)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        food = self.food
        return {
            "tick": self.tick,
            "score": self._score,
            "game_over": self._game_over,
            "direction": self.direction.name,
            "pending_directions": [d.name for d in self._buffer.to_list()],
            "snake": self.snake.to_dict(),
            "food": list(food) if food is not None else None,
            "grid": self._grid.to_dict(),
        }

    def _add_head(self, pos: Position) -> None:
        self.snake.add_head(pos)
        self._grid.set(pos, CellType.SNAKE)

    def _remove_tail(self) -> None:
        tail = self.snake.remove_tail()
        self._grid.set(tail, CellType.EMPTY)

    def _end_game(self, target: Position, hit: CellType) -> None:
        self._game_over = True
        cause = "wall" if hit == CellType.OUTSIDE else "self"
        logger.info(
            "Game over at tick %d with score %d (%s collision at %s).",
            self.tick, self._score, cause, tuple(target),
        )
