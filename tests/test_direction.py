"""Tests for directions and the double-buffered heading."""

import pytest

from snakeuh.direction import Direction, Heading, is_reversal


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite == Direction.DOWN
        assert Direction.DOWN.opposite == Direction.UP
        assert Direction.LEFT.opposite == Direction.RIGHT
        assert Direction.RIGHT.opposite == Direction.LEFT

    def test_up_is_positive_y(self):
        assert Direction.UP.value == (0, 1)

    def test_from_name(self):
        assert Direction.from_name("left") == Direction.LEFT
        assert Direction.from_name("UP") == Direction.UP

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.from_name("sideways")

    def test_is_reversal(self):
        assert is_reversal(Direction.LEFT, Direction.RIGHT)
        assert not is_reversal(Direction.LEFT, Direction.UP)
        assert not is_reversal(Direction.LEFT, Direction.LEFT)


class TestHeading:
    def test_starts_with_same_current_and_pending(self):
        heading = Heading(Direction.UP)
        assert heading.current == Direction.UP
        assert heading.pending == Direction.UP

    def test_reversal_ignored(self):
        heading = Heading(Direction.LEFT)
        assert not heading.request(Direction.RIGHT)
        assert heading.pending == Direction.LEFT

    def test_perpendicular_accepted(self):
        heading = Heading(Direction.LEFT)
        assert heading.request(Direction.UP)
        assert heading.pending == Direction.UP
        heading = Heading(Direction.LEFT)
        assert heading.request(Direction.DOWN)
        assert heading.pending == Direction.DOWN

    def test_last_valid_request_wins(self):
        heading = Heading(Direction.LEFT)
        heading.request(Direction.UP)
        heading.request(Direction.DOWN)
        assert heading.pending == Direction.DOWN

    def test_rejected_request_keeps_previous_pending(self):
        heading = Heading(Direction.UP)
        heading.request(Direction.LEFT)
        # Still checked against the applied direction, not the pending one.
        assert not heading.request(Direction.DOWN)
        assert heading.pending == Direction.LEFT

    def test_current_unchanged_until_commit(self):
        heading = Heading(Direction.UP)
        heading.request(Direction.RIGHT)
        assert heading.current == Direction.UP
        assert heading.commit() == Direction.RIGHT
        assert heading.current == Direction.RIGHT

    def test_to_dict(self):
        heading = Heading(Direction.UP)
        heading.request(Direction.LEFT)
        assert heading.to_dict() == {"current": "up", "pending": "left"}
