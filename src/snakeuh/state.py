"""Per-session mutable game state and lifecycle enums."""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass


class SessionStatus(str, enum.Enum):
    """Lifecycle of a session. ``TERMINATED`` is final."""

    RUNNING = "running"
    TERMINATED = "terminated"


class TerminationReason(str, enum.Enum):
    """Why a session stopped."""

    DEATH = "death"
    QUIT = "quit"


@dataclass
class GameState:
    """Flags, pacing and score shared by the clock and the rules.

    ``just_ate`` is cleared by the food respawn, ``must_grow`` by the next
    chain advance. ``length`` counts the head, so it starts at 1.
    """

    step_ms: float = 80
    elapsed_ms: float = 0.0
    just_ate: bool = False
    must_grow: bool = False
    length: int = 1

    def to_dict(self) -> dict:
        return asdict(self)
