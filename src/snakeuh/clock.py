"""Fixed-step pacing gate with step-duration decay."""

from __future__ import annotations

import logging

from snakeuh.state import GameState

logger = logging.getLogger(__name__)


class PacingController:
    """Decouples the frame rate from the simulation step rate.

    Frame deltas accumulate into ``state.elapsed_ms``. Once the
    accumulator reaches ``state.step_ms`` it is reset to zero and a single
    advance is authorised; leftover time is dropped rather than carried.
    """

    def __init__(
        self,
        state: GameState,
        min_step_ms: float = 32,
        step_decrement_ms: float = 2,
    ) -> None:
        if min_step_ms < 0:
            raise ValueError("min_step_ms must be >= 0.")
        if step_decrement_ms < 0:
            raise ValueError("step_decrement_ms must be >= 0.")
        self.state = state
        self.min_step_ms = min_step_ms
        self.step_decrement_ms = step_decrement_ms

    def tick(self, delta_ms: float) -> bool:
        """Accumulate *delta_ms*; return True if an advance is due."""
        if delta_ms < 0:
            raise ValueError("Frame delta must be non-negative.")
        self.state.elapsed_ms += delta_ms
        if self.state.elapsed_ms >= self.state.step_ms:
            self.state.elapsed_ms = 0.0
            return True
        return False

    def speed_up(self) -> float:
        """Shorten the step interval by one decrement, clamped at the minimum."""
        self.state.step_ms = max(
            self.min_step_ms, self.state.step_ms - self.step_decrement_ms,
        )
        logger.debug("Step interval now %s ms.", self.state.step_ms)
        return self.state.step_ms

    def reset(self) -> None:
        """Discard accumulated time without touching the step interval."""
        self.state.elapsed_ms = 0.0
