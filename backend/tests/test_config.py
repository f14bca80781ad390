"""
Tests for config.py - GameConfig validation and environment loading.
"""

import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig, load_config


class TestGameConfig:

    def test_defaults(self):
        config = GameConfig()
        assert config.grid_size == 25
        assert config.apple_count == 3
        assert config.tick_interval_ms == 120
        assert config.high_score_key == "snakeHighScore"
        assert config.tick_interval_seconds == pytest.approx(0.12)
        assert config.initial_length == 3

    @pytest.mark.parametrize("kwargs", [
        {"grid_size": 1},
        {"apple_count": -1},
        {"tick_interval_ms": 0},
        # 3x3 board with a 2-cell snake leaves 7 free cells
        {"grid_size": 3, "apple_count": 7},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs)

    def test_small_board_allowed(self):
        config = GameConfig(grid_size=3, apple_count=6)
        assert config.initial_length == 2


class TestLoadConfig:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "12")
        monkeypatch.setenv("SNAKE_APPLE_COUNT", "5")
        monkeypatch.setenv("SNAKE_TICK_MS", "80")
        monkeypatch.setenv("SNAKE_HIGH_SCORE_KEY", "best")

        config = load_config()

        assert config == GameConfig(grid_size=12, apple_count=5, tick_interval_ms=80, high_score_key="best")

    def test_blank_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "")
        monkeypatch.delenv("SNAKE_APPLE_COUNT", raising=False)
        monkeypatch.delenv("SNAKE_TICK_MS", raising=False)
        monkeypatch.delenv("SNAKE_HIGH_SCORE_KEY", raising=False)

        assert load_config() == GameConfig()

    def test_non_integer_rejected(self, monkeypatch):
        monkeypatch.setenv("SNAKE_GRID_SIZE", "big")
        with pytest.raises(ValueError, match="SNAKE_GRID_SIZE"):
            load_config()
