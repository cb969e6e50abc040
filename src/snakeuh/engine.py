"""Frame-driven game engine composing grid, snake, food, clock and rules."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from snakeuh.clock import PacingController
from snakeuh.config import GameConfig
from snakeuh.direction import Direction, Heading
from snakeuh.food import FoodSpawner
from snakeuh.grid import Grid, Position
from snakeuh.rules import check_death, check_eat
from snakeuh.snake import Snake
from snakeuh.state import GameState, SessionStatus, TerminationReason

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-session, frame-driven game engine.

    The engine owns the grid, snake, heading, food spawner and game state.
    Each call to :meth:`frame` processes one rendered frame: input, rules,
    food respawn, then at most one chain advance when the pacing gate
    opens. A terminated engine ignores further frames.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.grid = Grid(cfg.width, cfg.height, cfg.cell_size)
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)

        self.snake = Snake(*cfg.start)
        self.heading = Heading(Direction.from_name(cfg.start_direction))
        self.food = FoodSpawner(self.grid, rng=self.rng, position=cfg.first_food)
        self.state = GameState(step_ms=cfg.default_step_ms)
        self.pacing = PacingController(
            self.state,
            min_step_ms=cfg.min_step_ms,
            step_decrement_ms=cfg.step_decrement_ms,
        )

        self.status = SessionStatus.RUNNING
        self.reason: TerminationReason | None = None
        self.frames = 0
        self.advances = 0
        logger.info(
            "Session started on a %dx%d grid (step %s ms).",
            cfg.width, cfg.height, cfg.default_step_ms,
        )

    # --- render boundary ---

    @property
    def head(self) -> Position:
        return self.snake.head

    @property
    def direction(self) -> Direction:
        return self.heading.current

    @property
    def body(self) -> list[Position]:
        return self.snake.body

    @property
    def food_position(self) -> Position | None:
        return self.food.position

    @property
    def terminated(self) -> bool:
        return self.status == SessionStatus.TERMINATED

    # --- input boundary ---

    def set_direction(self, direction: Direction) -> bool:
        """Request a turn for the next advance; reversals are ignored."""
        if self.terminated:
            return False
        return self.heading.request(direction)

    def quit(self) -> None:
        """End the session at the player's request."""
        self._terminate(TerminationReason.QUIT)

    # --- frame ---

    def frame(
        self,
        delta_ms: float,
        directions: Iterable[Direction] = (),
        quit: bool = False,
    ) -> dict:
        """Process one frame and return the resulting state snapshot.

        *directions* are the key-press edges seen this frame, oldest first.
        """
        if self.terminated:
            return self.get_state()
        self.frames += 1

        for direction in directions:
            self.heading.request(direction)
        if quit:
            self._terminate(TerminationReason.QUIT)
            return self.get_state()

        # Rules run against the positions drawn last frame.
        if self.food.position is None and not self.state.just_ate:
            raise RuntimeError("Food is missing outside the respawn window.")
        if check_death(self.snake):
            self._terminate(TerminationReason.DEATH)
            return self.get_state()
        check_eat(self.snake, self.food, self.state, self.pacing)
        self.food.respawn(self.state, self.snake.segments)

        if self.pacing.tick(delta_ms):
            self._advance()

        return self.get_state()

    def _advance(self) -> None:
        direction = self.heading.commit()
        grow = self.state.must_grow
        vacated = self.snake.advance(direction, self.grid, grow=grow)
        self.state.must_grow = False
        self.advances += 1
        logger.debug(
            "Advance %d: head %s heading %s, vacated %s%s.",
            self.advances, self.snake.head, direction.name, vacated,
            " (grew)" if grow else "",
        )

    def _terminate(self, reason: TerminationReason) -> None:
        if self.terminated:
            return
        self.status = SessionStatus.TERMINATED
        self.reason = reason
        logger.info(
            "Session ended (%s) after %d frames with length %d.",
            reason.value, self.frames, self.state.length,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "frame": self.frames,
            "advances": self.advances,
            "status": self.status.value,
            "reason": self.reason.value if self.reason is not None else None,
            "heading": self.heading.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
            "game": self.state.to_dict(),
            "grid": self.grid.to_dict(),
        }
