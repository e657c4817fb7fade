"""Tests for the snake module."""

import pytest

from grid_snake.snake import Direction, Position, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.DOWN.opposite() == Direction.UP
        assert Direction.LEFT.opposite() == Direction.RIGHT
        assert Direction.RIGHT.opposite() == Direction.LEFT

    def test_opposite_deltas_cancel(self):
        for direction in Direction:
            dr, dc = direction.value
            odr, odc = direction.opposite().value
            assert (dr + odr, dc + odc) == (0, 0)


class TestPosition:
    def test_translate(self):
        pos = Position(5, 5)
        assert pos.translate(Direction.UP) == Position(4, 5)
        assert pos.translate(Direction.DOWN) == Position(6, 5)
        assert pos.translate(Direction.LEFT) == Position(5, 4)
        assert pos.translate(Direction.RIGHT) == Position(5, 6)

    def test_structural_equality(self):
        assert Position(2, 3) == Position(2, 3)
        assert Position(2, 3) == (2, 3)
        assert Position(2, 3) != Position(3, 2)

    def test_translate_can_leave_grid(self):
        assert Position(0, 0).translate(Direction.UP) == Position(-1, 0)


class TestSnakeInit:
    def test_head_and_tail(self):
        snake = Snake([(5, 3), (5, 2), (5, 1)])
        assert snake.head == Position(5, 3)
        assert snake.tail == Position(5, 1)
        assert len(snake) == 3

    def test_empty_body_rejected(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake([])


class TestSnakeMutation:
    def test_add_head(self):
        snake = Snake([(5, 3), (5, 2)])
        snake.add_head(Position(5, 4))
        assert list(snake) == [(5, 4), (5, 3), (5, 2)]

    def test_remove_tail(self):
        snake = Snake([(5, 3), (5, 2), (5, 1)])
        assert snake.remove_tail() == Position(5, 1)
        assert snake.tail == Position(5, 2)

    def test_cannot_remove_last_segment(self):
        snake = Snake([(5, 3)])
        with pytest.raises(ValueError):
            snake.remove_tail()


class TestSnakeSerialization:
    def test_to_dict(self):
        snake = Snake([(5, 5), (5, 4)])
        d = snake.to_dict()
        assert d["body"] == [[5, 5], [5, 4]]
        assert d["length"] == 2
