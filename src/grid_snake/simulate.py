"""Headless simulation for throughput and score measurement."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from grid_snake.engine import GameState
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS: list[Direction] = list(Direction)

# Seed used when the caller does not pick one, so runs are reproducible.
DEFAULT_SEED = 42


@dataclass
class SimulationResult:
    """Results from a batch of random-policy games."""

    total_games: int
    total_ticks: int
    mean_score: float
    max_score: int
    wall_time_seconds: float
    games_per_second: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Simulation: {self.total_games} games, {self.total_ticks} ticks "
            f"in {self.wall_time_seconds:.2f}s | "
            f"mean score {self.mean_score:.2f}, max score {self.max_score} | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def simulate_games(
    *,
    num_games: int = 100,
    rows: int = 20,
    cols: int = 20,
    max_ticks: int = 500,
    direction_buffer_size: int = 2,
    seed: int | None = DEFAULT_SEED,
) -> SimulationResult:
    """Play *num_games* games with a random direction policy.

    Each tick issues one random direction request before moving, so
    rejected reversals are exercised as well. A game stops at game over
    or after *max_ticks* moves.
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1.")
    if max_ticks < 1:
        raise ValueError("max_ticks must be at least 1.")

    rng = np.random.default_rng(seed)
    total_ticks = 0
    scores: list[int] = []
    start = time.perf_counter()

    for _ in range(num_games):
        game = GameState(
            rows,
            cols,
            seed=int(rng.integers(2**31)),
            direction_buffer_size=direction_buffer_size,
        )
        for _ in range(max_ticks):
            game.change_direction(_DIRECTIONS[int(rng.integers(4))])
            game.move()
            total_ticks += 1
            if game.game_over:
                break
        scores.append(game.score)

    elapsed = time.perf_counter() - start
    result = SimulationResult(
        total_games=num_games,
        total_ticks=total_ticks,
        mean_score=float(np.mean(scores)),
        max_score=max(scores),
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
