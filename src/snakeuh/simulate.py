"""Headless simulation driven by a random steering policy."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from snakeuh.config import GameConfig
from snakeuh.direction import Direction
from snakeuh.engine import GameEngine

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass(frozen=True)
class SimulationResult:
    """Summary of one headless session."""

    frames: int
    advances: int
    length: int
    step_ms: float
    reason: str

    def summary(self) -> str:
        return (
            f"frames={self.frames} advances={self.advances} "
            f"length={self.length} step_ms={self.step_ms} reason={self.reason}"
        )


def simulate(
    config: GameConfig | None = None,
    max_frames: int = 10_000,
    frame_ms: float = 1000 / 60,
    turn_probability: float = 0.1,
    seed: int | None = None,
) -> SimulationResult:
    """Run a session without a window until death or *max_frames*.

    Each frame the policy presses a random arrow key with probability
    *turn_probability*; reversals are filtered by the engine as usual.
    """
    if max_frames < 1:
        raise ValueError("max_frames must be at least 1.")
    if not 0.0 <= turn_probability <= 1.0:
        raise ValueError("turn_probability must be within [0, 1].")

    policy_rng = np.random.default_rng(seed)
    engine = GameEngine(config)
    while engine.frames < max_frames and not engine.terminated:
        directions: list[Direction] = []
        if policy_rng.random() < turn_probability:
            directions.append(_DIRECTIONS[policy_rng.integers(len(_DIRECTIONS))])
        engine.frame(frame_ms, directions)

    result = SimulationResult(
        frames=engine.frames,
        advances=engine.advances,
        length=engine.state.length,
        step_ms=engine.state.step_ms,
        reason=engine.reason.value if engine.reason else "frame limit",
    )
    logger.info("Simulation finished: %s", result.summary())
    return result
