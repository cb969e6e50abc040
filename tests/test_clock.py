"""Tests for the pacing controller."""

import pytest

from snakeuh.clock import PacingController
from snakeuh.state import GameState


class TestPacingGate:
    def test_below_interval_no_advance(self):
        pacing = PacingController(GameState(step_ms=80))
        assert not pacing.tick(50)
        assert not pacing.tick(29)
        assert pacing.state.elapsed_ms == 79

    def test_reaching_interval_advances_once(self):
        pacing = PacingController(GameState(step_ms=80))
        pacing.tick(79)
        assert pacing.tick(1)
        assert pacing.state.elapsed_ms == 0

    def test_overshoot_resets_to_zero(self):
        pacing = PacingController(GameState(step_ms=80))
        assert pacing.tick(200)
        assert pacing.state.elapsed_ms == 0
        assert not pacing.tick(79)

    def test_negative_delta_rejected(self):
        pacing = PacingController(GameState())
        with pytest.raises(ValueError, match="non-negative"):
            pacing.tick(-1)

    def test_reset(self):
        pacing = PacingController(GameState(step_ms=80))
        pacing.tick(40)
        pacing.reset()
        assert pacing.state.elapsed_ms == 0
        assert pacing.state.step_ms == 80


class TestSpeedUp:
    def test_decrements_by_two(self):
        pacing = PacingController(GameState(step_ms=80))
        assert pacing.speed_up() == 78

    def test_monotonic_and_clamped(self):
        pacing = PacingController(GameState(step_ms=80), min_step_ms=32, step_decrement_ms=2)
        for k in range(1, 40):
            pacing.speed_up()
            assert pacing.state.step_ms == max(32, 80 - 2 * k)

    def test_invalid_settings(self):
        with pytest.raises(ValueError, match="min_step_ms"):
            PacingController(GameState(), min_step_ms=-1)
        with pytest.raises(ValueError, match="step_decrement_ms"):
            PacingController(GameState(), step_decrement_ms=-1)
