"""Heading enumeration and the double-buffered turn model."""

from __future__ import annotations

import enum
import logging

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values; +y is up."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name (``"up"`` etc.)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_reversal(current: Direction, requested: Direction) -> bool:
    """Return True if *requested* points straight back along *current*."""
    return _OPPOSITES[current] is requested


class Heading:
    """Applied and pending directions of the snake head.

    Input only ever touches :attr:`pending`; :meth:`commit` copies it into
    :attr:`current` at the start of an advance. Turns are validated against
    the *current* direction, so two quick turns between advances cannot
    fold the head back onto its neck.
    """

    __slots__ = ("current", "pending")

    def __init__(self, direction: Direction = Direction.UP) -> None:
        self.current = direction
        self.pending = direction

    def request(self, requested: Direction) -> bool:
        """Set the pending direction unless it reverses the current one.

        Returns True if the request was accepted. Rejected requests leave
        the previous pending direction in place.
        """
        if is_reversal(self.current, requested):
            logger.debug(
                "Ignored reversal %s while heading %s.",
                requested.name, self.current.name,
            )
            return False
        self.pending = requested
        return True

    def commit(self) -> Direction:
        """Apply the pending direction and return it."""
        self.current = self.pending
        return self.current

    def to_dict(self) -> dict:
        return {
            "current": self.current.name.lower(),
            "pending": self.pending.name.lower(),
        }
