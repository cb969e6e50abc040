"""Pygame window: keyboard input in, sprites out."""

from __future__ import annotations

import logging
from typing import Iterable

import pygame

from snakeuh.config import GameConfig
from snakeuh.direction import Direction
from snakeuh.engine import GameEngine
from snakeuh.grid import Grid, Position

logger = logging.getLogger(__name__)

TITLE = "Snakeuh !"
FPS = 60

KEY_DIRECTIONS: dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

# Sprite edge relative to the cell size.
_HEAD_PAD = 3
_BODY_PAD = -1


def collect_input(events: Iterable[pygame.event.Event]) -> tuple[list[Direction], bool]:
    """Translate one frame of pygame events into directions and a quit flag."""
    directions: list[Direction] = []
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                quit_requested = True
            elif event.key in KEY_DIRECTIONS:
                directions.append(KEY_DIRECTIONS[event.key])
    return directions, quit_requested


def window_size(grid: Grid) -> tuple[int, int]:
    return grid.width * grid.cell_size, grid.height * grid.cell_size


def cell_rect(grid: Grid, position: Position, pad: int = 0) -> pygame.Rect:
    """Screen rectangle for a cell; the board centre is the window centre."""
    w, h = window_size(grid)
    ox, oy = grid.to_pixels(*position)
    side = grid.cell_size + pad
    rect = pygame.Rect(0, 0, side, side)
    rect.center = (w // 2 + ox, h // 2 - oy)
    return rect


def draw(screen: pygame.Surface, engine: GameEngine) -> None:
    """Paint the area, the food, the body and finally the head."""
    cfg = engine.config
    grid = engine.grid
    screen.fill(cfg.area_color)
    if engine.food_position is not None:
        pygame.draw.rect(screen, cfg.food_color, cell_rect(grid, engine.food_position))
    for segment in engine.body:
        pygame.draw.rect(screen, cfg.body_color, cell_rect(grid, segment, _BODY_PAD))
    pygame.draw.rect(screen, cfg.head_color, cell_rect(grid, engine.head, _HEAD_PAD))


def run(config: GameConfig | None = None, max_frames: int | None = None) -> int:
    """Open the window and play one session. Returns the process exit code."""
    engine = GameEngine(config)
    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(engine.grid))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        delta_ms = 0
        while not engine.terminated:
            directions, quit_requested = collect_input(pygame.event.get())
            engine.frame(delta_ms, directions, quit=quit_requested)
            draw(screen, engine)
            pygame.display.flip()
            if max_frames is not None and engine.frames >= max_frames:
                break
            # High FPS; movement is gated by the engine's pacing controller.
            delta_ms = clock.tick(FPS)
    finally:
        pygame.quit()
    logger.info(
        "Window closed: %s, length %d.",
        engine.reason.value if engine.reason else "frame limit",
        engine.state.length,
    )
    return 0
