"""Command-line launcher for Snakeuh."""

from __future__ import annotations

import argparse
import logging
import sys

from snakeuh.config import GameConfig

logger = logging.getLogger(__name__)


def _add_config_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    p.add_argument("--width", type=int, default=None)
    p.add_argument("--height", type=int, default=None)
    p.add_argument("--cell-size", type=int, default=None)
    p.add_argument("--step-ms", type=int, default=None)
    p.add_argument("--min-step-ms", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snakeuh",
        description="Grid snake with wraparound edges and speed ramp.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open the game window.")
    _add_config_flags(play_p)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a headless session with random steering.",
    )
    _add_config_flags(sim_p)
    sim_p.add_argument("--max-frames", type=int, default=10_000)
    sim_p.add_argument("--frame-ms", type=float, default=1000 / 60)
    sim_p.add_argument("--turn-probability", type=float, default=0.1)
    sim_p.add_argument("--policy-seed", type=int, default=None)

    # --- render ---
    render_p = sub.add_parser(
        "render", help="Print the starting board as ASCII.",
    )
    _add_config_flags(render_p)

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = (
        GameConfig.load(args.config)
        if args.config else GameConfig()
    )

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "cell_size": "cell_size",
        "step_ms": "default_step_ms",
        "min_step_ms": "min_step_ms",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val

    if overrides:
        config = config.replace(**overrides)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from snakeuh.display import run

    return run(_load_config(args))


def _run_simulate(args: argparse.Namespace) -> int:
    from snakeuh.simulate import simulate

    result = simulate(
        _load_config(args),
        max_frames=args.max_frames,
        frame_ms=args.frame_ms,
        turn_probability=args.turn_probability,
        seed=args.policy_seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_render(args: argparse.Namespace) -> int:
    from snakeuh.engine import GameEngine

    engine = GameEngine(_load_config(args))
    print(engine.grid.render_text(engine.snake.segments, engine.food_position))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snakeuh`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "simulate": _run_simulate,
        "render": _run_render,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
