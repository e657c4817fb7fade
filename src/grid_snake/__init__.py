"""Grid Snake — core game engine."""

from grid_snake.config import GameConfig
from grid_snake.direction_buffer import DirectionBuffer
from grid_snake.engine import GameState
from grid_snake.food import FoodSpawner
from grid_snake.grid import CellType, Grid
from grid_snake.simulate import SimulationResult, simulate_games
from grid_snake.snake import Direction, Position, Snake

__all__ = [
    "CellType",
    "Direction",
    "DirectionBuffer",
    "FoodSpawner",
    "GameConfig",
    "GameState",
    "Grid",
    "Position",
    "SimulationResult",
    "Snake",
    "simulate_games",
]
