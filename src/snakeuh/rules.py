"""Per-frame collision and food-consumption rules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snakeuh.clock import PacingController
    from snakeuh.food import FoodSpawner
    from snakeuh.snake import Snake
    from snakeuh.state import GameState

logger = logging.getLogger(__name__)


def check_death(snake: Snake) -> bool:
    """Return True if the head shares a cell with any body segment."""
    return snake.self_collision()


def check_eat(
    snake: Snake,
    food: FoodSpawner,
    state: GameState,
    pacing: PacingController,
) -> bool:
    """Consume the food if the head is on it.

    Flags the respawn and the growth, bumps the length and shortens the
    step interval. Growth itself lands on the next chain advance.
    """
    if food.position is None or food.position != snake.head:
        return False
    food.despawn()
    state.just_ate = True
    state.must_grow = True
    state.length += 1
    pacing.speed_up()
    logger.info(
        "Ate food at %s; length %d, step %s ms.",
        snake.head, state.length, state.step_ms,
    )
    return True
