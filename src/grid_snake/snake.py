"""Directions, grid positions, and the snake body."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from typing import NamedTuple


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    def opposite(self) -> Direction:
        """Return the direction that would reverse this one."""
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Position(NamedTuple):
    """A (row, col) grid coordinate."""

    row: int
    col: int

    def translate(self, direction: Direction) -> Position:
        """Return the adjacent position one step in *direction*."""
        dr, dc = direction.value
        return Position(self.row + dr, self.col + dc)


class Snake:
    """A snake represented as an ordered deque of body positions.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake does not
    know about the grid; callers keep the two in step.
    """

    def __init__(self, segments: Iterable[tuple[int, int]]) -> None:
        self.body: deque[Position] = deque(Position(r, c) for r, c in segments)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        """Return the tail coordinate."""
        return self.body[-1]

    def add_head(self, pos: Position) -> None:
        self.body.appendleft(pos)

    def remove_tail(self) -> Position:
        """Drop the tail segment and return the vacated position."""
        if len(self.body) == 1:
            raise ValueError("Cannot remove the last remaining segment.")
        return self.body.pop()

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "length": len(self.body),
        }
