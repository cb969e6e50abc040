"""Tests for the pygame display adapter (SDL dummy drivers)."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from snakeuh.config import GameConfig  # noqa: E402
from snakeuh.direction import Direction  # noqa: E402
from snakeuh.display import cell_rect, collect_input, draw, run, window_size  # noqa: E402
from snakeuh.engine import GameEngine  # noqa: E402


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestCollectInput:
    def test_arrow_keys(self):
        directions, quit_requested = collect_input([
            _key(pygame.K_LEFT), _key(pygame.K_UP),
        ])
        assert directions == [Direction.LEFT, Direction.UP]
        assert not quit_requested

    def test_escape_quits(self):
        _, quit_requested = collect_input([_key(pygame.K_ESCAPE)])
        assert quit_requested

    def test_window_close_quits(self):
        _, quit_requested = collect_input([pygame.event.Event(pygame.QUIT)])
        assert quit_requested

    def test_other_keys_ignored(self):
        assert collect_input([_key(pygame.K_a)]) == ([], False)


class TestGeometry:
    def test_window_size(self):
        engine = GameEngine(GameConfig())
        assert window_size(engine.grid) == (1060, 620)

    def test_origin_at_window_centre(self):
        grid = GameEngine(GameConfig()).grid
        assert cell_rect(grid, (0, 0)).center == (530, 310)

    def test_y_axis_points_up(self):
        grid = GameEngine(GameConfig()).grid
        assert cell_rect(grid, (1, 1)).center == (550, 290)
        assert cell_rect(grid, (0, 0), pad=3).width == 23


class TestDraw:
    def test_sprites_painted(self):
        cfg = GameConfig(seed=0)
        engine = GameEngine(cfg)
        screen = pygame.Surface(window_size(engine.grid))
        draw(screen, engine)
        assert tuple(screen.get_at((530, 310)))[:3] == cfg.head_color
        assert tuple(screen.get_at((550, 290)))[:3] == cfg.food_color
        assert tuple(screen.get_at((5, 5)))[:3] == cfg.area_color


class TestRun:
    def test_frame_limited_run_exits_cleanly(self):
        assert run(GameConfig(width=9, height=9, seed=0), max_frames=3) == 0
