"""
Runtime configuration for Neon Snake.

Values come from the environment (a .env file is loaded with python-dotenv)
and fall back to the defaults in domain.constants.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from domain.constants import (
    CELL_COUNT,
    APPLE_COUNT,
    INITIAL_SPEED_MS,
    INITIAL_SNAKE_LENGTH,
    HIGH_SCORE_KEY,
)

load_dotenv()


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = CELL_COUNT
    apple_count: int = APPLE_COUNT
    tick_interval_ms: int = INITIAL_SPEED_MS
    high_score_key: str = HIGH_SCORE_KEY

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")
        if self.apple_count < 0:
            raise ValueError(f"apple_count cannot be negative, got {self.apple_count}")

        free_cells = self.grid_size * self.grid_size - self.initial_length
        if self.apple_count >= free_cells:
            raise ValueError(
                f"apple_count {self.apple_count} leaves no room on a "
                f"{self.grid_size}x{self.grid_size} board"
            )

    @property
    def initial_length(self) -> int:
        # The starting body hangs below the centre cell and must fit on the board
        return min(INITIAL_SNAKE_LENGTH, self.grid_size - self.grid_size // 2)

    @property
    def tick_interval_seconds(self) -> float:
        return self.tick_interval_ms / 1000.0


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_config() -> GameConfig:
    """Build a GameConfig from SNAKE_* environment variables."""
    return GameConfig(
        grid_size=_int_from_env("SNAKE_GRID_SIZE", CELL_COUNT),
        apple_count=_int_from_env("SNAKE_APPLE_COUNT", APPLE_COUNT),
        tick_interval_ms=_int_from_env("SNAKE_TICK_MS", INITIAL_SPEED_MS),
        high_score_key=os.getenv("SNAKE_HIGH_SCORE_KEY", HIGH_SCORE_KEY),
    )
