"""Bounded queue of pending direction changes."""

from __future__ import annotations

import logging
from collections import deque

from grid_snake.snake import Direction

logger = logging.getLogger(__name__)


class DirectionBuffer:
    """FIFO of direction requests made between two ticks.

    Input can arrive faster than the tick rate; buffering lets quick
    successive turns survive until the next move, one consumed per tick.
    A request is dropped when the buffer is full, or when it repeats or
    reverses the last effective direction (the newest queued entry, or the
    current direction when nothing is queued).
    """

    def __init__(self, capacity: int = 2) -> None:
        if capacity < 1:
            raise ValueError("Direction buffer capacity must be at least 1.")
        self.capacity = capacity
        self._pending: deque[Direction] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def peek_last(self, current: Direction) -> Direction:
        """Return the direction the snake will face after the queue drains."""
        return self._pending[-1] if self._pending else current

    def offer(self, direction: Direction, current: Direction) -> bool:
        """Queue *direction* if allowed. Returns True when it was queued."""
        if len(self._pending) >= self.capacity:
            logger.debug("Dropped %s: buffer full.", direction.name)
            return False

        last = self.peek_last(current)
        if direction == last or direction == last.opposite():
            logger.debug(
                "Dropped %s: same as or opposite of %s.",
                direction.name, last.name,
            )
            return False

        self._pending.append(direction)
        return True

    def pop(self) -> Direction | None:
        """Remove and return the oldest pending direction, if any."""
        if not self._pending:
            return None
        return self._pending.popleft()

    def to_list(self) -> list[Direction]:
        return list(self._pending)
