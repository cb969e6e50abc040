"""Snakeuh — wraparound snake simulation core."""

from snakeuh.clock import PacingController
from snakeuh.config import GameConfig
from snakeuh.direction import Direction, Heading
from snakeuh.engine import GameEngine
from snakeuh.food import FoodSpawner
from snakeuh.grid import Grid, wrap
from snakeuh.snake import Snake
from snakeuh.state import GameState, SessionStatus, TerminationReason

__all__ = [
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Grid",
    "Heading",
    "PacingController",
    "SessionStatus",
    "Snake",
    "TerminationReason",
    "wrap",
]
