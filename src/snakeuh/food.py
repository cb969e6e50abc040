"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from snakeuh.grid import Grid, Position
    from snakeuh.state import GameState

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Owns the single food item and places it on the board.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Cells are drawn from the grid interior without checking the snake, so
    food can land on a body segment.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        position: Position | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position = position

    def spawn(self, occupied: Iterable[Position] = ()) -> Position:
        """Place food on a random interior cell and return it."""
        x_lo, x_hi = self.grid.interior_x
        y_lo, y_hi = self.grid.interior_y
        x = int(self.rng.integers(x_lo, x_hi, endpoint=True))
        y = int(self.rng.integers(y_lo, y_hi, endpoint=True))
        self.position = (x, y)
        if self.position in set(occupied):
            logger.debug("Food spawned on occupied cell %s.", self.position)
        return self.position

    def despawn(self) -> Position:
        """Remove the food and return where it was."""
        if self.position is None:
            raise RuntimeError("No food to despawn.")
        pos, self.position = self.position, None
        return pos

    def respawn(
        self,
        state: GameState,
        occupied: Iterable[Position] = (),
    ) -> Position | None:
        """Spawn replacement food if the snake just ate; clears ``just_ate``.

        Returns the new position, or ``None`` when nothing was eaten.
        """
        if not state.just_ate:
            return None
        if self.position is not None:
            raise RuntimeError("Respawn requested while food is present.")
        pos = self.spawn(occupied)
        state.just_ate = False
        logger.debug("Food respawned at %s.", pos)
        return pos

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "position": list(self.position) if self.position is not None else None,
        }
