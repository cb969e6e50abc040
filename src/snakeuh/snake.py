"""Snake chain representation and shift-and-grow movement."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snakeuh.direction import Direction
    from snakeuh.grid import Grid, Position


class Snake:
    """A snake represented as an ordered list of (x, y) segments.

    The head is ``segments[0]``; the tail is ``segments[-1]``. Only the
    head is steered, every other segment follows the path it traced.
    """

    def __init__(self, start_x: int = 0, start_y: int = 0) -> None:
        self.segments: list[Position] = [(start_x, start_y)]

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        if not self.segments:
            raise RuntimeError("Snake has no head.")
        return self.segments[0]

    @property
    def body(self) -> list[Position]:
        """Segments behind the head, head-adjacent first."""
        return self.segments[1:]

    def __len__(self) -> int:
        return len(self.segments)

    def advance(
        self,
        direction: Direction,
        grid: Grid,
        grow: bool = False,
    ) -> Position:
        """Move the snake one cell in *direction*.

        Each body segment takes the previous position of the segment ahead
        of it. Returns the cell the tail vacated; when *grow* is set a new
        tail segment is appended on exactly that cell.
        """
        carry = self.head
        self.segments[0] = grid.step(carry, direction)
        for i in range(1, len(self.segments)):
            self.segments[i], carry = carry, self.segments[i]
        if grow:
            self.segments.append(carry)
        return carry

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.segments

    def self_collision(self) -> bool:
        """Check whether the head overlaps any body segment."""
        head = self.head
        return any(seg == head for seg in self.segments[1:])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "head": list(self.head),
            "body": [list(seg) for seg in self.body],
            "length": len(self.segments),
        }
