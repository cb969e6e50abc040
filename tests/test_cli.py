"""Tests for the command-line launcher."""

from snakeuh.cli import _build_parser, main
from snakeuh.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_play_defaults(self):
        args = _build_parser().parse_args(["play"])
        assert args.command == "play"
        assert args.config is None
        assert args.width is None
        assert args.seed is None

    def test_simulate_flags(self):
        args = _build_parser().parse_args([
            "simulate", "--max-frames", "50", "--frame-ms", "20",
            "--turn-probability", "0.5", "--policy-seed", "4",
        ])
        assert args.max_frames == 50
        assert args.frame_ms == 20.0
        assert args.turn_probability == 0.5
        assert args.policy_seed == 4


class TestCLIRender:
    def test_render_small_board(self, capsys):
        assert main(["render", "--width", "5", "--height", "3"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["...*.", "..@..", "....."]

    def test_render_from_config_file(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        GameConfig(width=3, height=3, first_food=(0, 1)).save(path)
        assert main(["render", "--config", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [".*.", ".@.", "..."]

    def test_invalid_config_returns_2(self):
        assert main(["render", "--width", "2"]) == 2


class TestCLISimulate:
    def test_simulate_prints_summary(self, capsys):
        result = main([
            "simulate", "--max-frames", "40", "--seed", "1",
            "--policy-seed", "2",
        ])
        assert result == 0
        out = capsys.readouterr().out
        assert "frames=" in out
        assert "length=" in out
