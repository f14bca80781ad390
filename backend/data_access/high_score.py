"""
High score persistence.

The high score is a single named integer in the key_value table. Storage
problems never reach the game: reads fall back to 0 and failed writes are
logged and dropped.
"""

import logging
from typing import Dict

from domain.constants import HIGH_SCORE_KEY
from .repositories import KeyValueRepository

logger = logging.getLogger(__name__)

# Repository instance
_kv_repo = KeyValueRepository()


def get_high_score(key: str = HIGH_SCORE_KEY) -> int:
    """
    Read the stored high score.

    Returns:
        The stored value, or 0 if it is missing, unreadable or not a
        non-negative integer.
    """
    try:
        raw = _kv_repo.get(key)
    except Exception as e:
        logger.warning(f"Could not read high score '{key}': {e}")
        return 0

    if raw is None:
        return 0

    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed high score '{key}': {raw!r}")
        return 0

    return max(value, 0)


def save_high_score(value: int, key: str = HIGH_SCORE_KEY) -> bool:
    """
    Write the high score.

    Returns:
        True if the value was stored, False if the write failed.
    """
    try:
        _kv_repo.set(key, str(int(value)))
        return True
    except Exception as e:
        logger.warning(f"Could not save high score '{key}': {e}")
        return False


class HighScoreStore:
    """Database-backed store handed to SnakeGame."""

    def __init__(self, key: str = HIGH_SCORE_KEY):
        self.key = key

    def load(self) -> int:
        return get_high_score(self.key)

    def save(self, value: int) -> bool:
        return save_high_score(value, self.key)


class InMemoryHighScoreStore:
    """Process-local store for headless runs and tests."""

    def __init__(self, initial: int = 0, key: str = HIGH_SCORE_KEY):
        self.key = key
        self._values: Dict[str, int] = {key: initial}

    def load(self) -> int:
        return self._values.get(self.key, 0)

    def save(self, value: int) -> bool:
        self._values[self.key] = int(value)
        return True
