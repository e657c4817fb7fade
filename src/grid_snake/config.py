"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# The starting snake occupies columns 1..3 of the middle row.
MIN_COLS = 4


@dataclass(frozen=True)
class GameConfig:
    """Board and engine settings for a single game.

    Supports JSON serialization for reproducibility.
    """

    rows: int = 20
    cols: int = 20
    direction_buffer_size: int = 2
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.rows < 1:
            raise ValueError("rows must be at least 1.")
        if self.cols < MIN_COLS:
            raise ValueError(
                f"cols must be at least {MIN_COLS} to fit the starting snake."
            )
        if self.direction_buffer_size < 1:
            raise ValueError("direction_buffer_size must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
