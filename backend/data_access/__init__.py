"""
Data access layer for Neon Snake.

This module provides the high score store and the repositories behind it.
"""

from .high_score import (
    get_high_score,
    save_high_score,
    HighScoreStore,
    InMemoryHighScoreStore,
)

__all__ = [
    'get_high_score',
    'save_high_score',
    'HighScoreStore',
    'InMemoryHighScoreStore',
]
