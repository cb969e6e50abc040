"""Build-time game constants bundled as a frozen, JSON-serializable config."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Grid size, pacing and colours for one session.

    Step durations are in milliseconds. Colours are RGB triples and only
    matter to the pygame display.
    """

    # Grid
    width: int = 53
    height: int = 31
    cell_size: int = 20

    # Pacing
    default_step_ms: int = 80
    min_step_ms: int = 32
    step_decrement_ms: int = 2

    # Initial layout
    start: tuple[int, int] = (0, 0)
    start_direction: str = "up"
    first_food: tuple[int, int] = (1, 1)

    # Colours
    head_color: tuple[int, int, int] = (238, 130, 238)
    body_color: tuple[int, int, int] = (238, 130, 238)
    food_color: tuple[int, int, int] = (220, 20, 60)
    area_color: tuple[int, int, int] = (46, 139, 87)

    # Food RNG
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ValueError("Grid dimensions must be at least 3x3.")
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if self.min_step_ms < 0:
            raise ValueError("min_step_ms must be >= 0.")
        if self.default_step_ms < self.min_step_ms:
            raise ValueError("default_step_ms must be >= min_step_ms.")
        if self.step_decrement_ms < 0:
            raise ValueError("step_decrement_ms must be >= 0.")
        if self.start_direction not in ("up", "down", "left", "right"):
            raise ValueError(
                f"Unknown start_direction {self.start_direction!r}.",
            )
        half_w, half_h = self.width // 2, self.height // 2
        for name in ("start", "first_food"):
            x, y = getattr(self, name)
            if not (-half_w <= x <= half_w and -half_h <= y <= half_h):
                raise ValueError(f"{name} {(x, y)} lies outside the grid.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def replace(self, **overrides) -> GameConfig:
        """Return a copy with *overrides* applied and re-validated."""
        d = self.to_dict()
        d.update(overrides)
        return GameConfig.from_dict(d)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(raw) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}.")
        data = dict(raw)
        for name in (
            "start", "first_food",
            "head_color", "body_color", "food_color", "area_color",
        ):
            if name in data:
                data[name] = tuple(data[name])
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
