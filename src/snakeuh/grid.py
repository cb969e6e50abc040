"""Toroidal grid geometry centred on the origin."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from snakeuh.direction import Direction

Position = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in an occupancy map."""

    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


def wrap(coord: int, half_extent: int) -> int:
    """Wrap a single coordinate that stepped past the grid edge.

    Leaving through ``+half_extent`` re-enters at ``-half_extent`` and vice
    versa; coordinates inside the grid are returned unchanged.
    """
    if coord > half_extent:
        return -half_extent
    if coord < -half_extent:
        return half_extent
    return coord


class Grid:
    """Cell geometry for a ``width`` x ``height`` board centred on (0, 0).

    Valid cells span ``[-width // 2, width // 2]`` horizontally and
    ``[-height // 2, height // 2]`` vertically, with +y pointing up.
    """

    def __init__(self, width: int = 53, height: int = 31, cell_size: int = 20) -> None:
        if width < 3 or height < 3:
            raise ValueError("Grid dimensions must be at least 3x3.")
        if cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.half_width = width // 2
        self.half_height = height // 2

    @property
    def interior_x(self) -> tuple[int, int]:
        """Inclusive x range that never touches the wrap boundary."""
        return -(self.half_width - 1), self.half_width - 1

    @property
    def interior_y(self) -> tuple[int, int]:
        """Inclusive y range that never touches the wrap boundary."""
        return -(self.half_height - 1), self.half_height - 1

    def contains(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies on the board."""
        return abs(x) <= self.half_width and abs(y) <= self.half_height

    def wrap_position(self, x: int, y: int) -> Position:
        """Wrap both axes of a coordinate."""
        return wrap(x, self.half_width), wrap(y, self.half_height)

    def step(self, position: Position, direction: Direction) -> Position:
        """Move one cell in *direction*, wrapping the moved axis."""
        dx, dy = direction.value
        x, y = position
        if dx:
            x = wrap(x + dx, self.half_width)
        if dy:
            y = wrap(y + dy, self.half_height)
        return x, y

    def to_pixels(self, x: int, y: int) -> tuple[int, int]:
        """Offset of a cell centre from the board centre, in pixels."""
        return x * self.cell_size, y * self.cell_size

    def occupancy(
        self,
        snake: Iterable[Position],
        food: Position | None = None,
    ) -> np.ndarray:
        """Paint the snake and food onto a row-major ``int8`` cell map.

        Row 0 is the top edge (largest y). The first snake position is
        painted as the head.
        """
        rows = 2 * self.half_height + 1
        cols = 2 * self.half_width + 1
        cells = np.zeros((rows, cols), dtype=np.int8)
        if food is not None:
            cells[self._index(*food)] = CellType.FOOD
        for i, (x, y) in enumerate(snake):
            cells[self._index(x, y)] = CellType.HEAD if i == 0 else CellType.BODY
        return cells

    def render_text(
        self,
        snake: Iterable[Position],
        food: Position | None = None,
    ) -> str:
        """ASCII picture of the board: ``@`` head, ``o`` body, ``*`` food."""
        glyphs = np.array([".", "o", "@", "*"])
        cells = self.occupancy(snake, food)
        return "\n".join("".join(row) for row in glyphs[cells])

    def _index(self, x: int, y: int) -> tuple[int, int]:
        if not self.contains(x, y):
            raise ValueError(f"Cell {(x, y)} lies outside the grid.")
        return self.half_height - y, x + self.half_width

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
        }
