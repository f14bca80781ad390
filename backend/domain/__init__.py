"""
Domain entities for the Neon Snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (database, HTTP, clock).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DIRECTION_DELTAS, OPPOSITE_DIRECTIONS,
    CELL_COUNT, APPLE_COUNT, INITIAL_SPEED_MS, POINTS_PER_APPLE,
)
from .errors import BoardFullError, InvalidDirectionError
from .snake import Snake
from .game_state import GameState, GameStatus

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DIRECTION_DELTAS', 'OPPOSITE_DIRECTIONS',
    'CELL_COUNT', 'APPLE_COUNT', 'INITIAL_SPEED_MS', 'POINTS_PER_APPLE',
    'BoardFullError', 'InvalidDirectionError',
    'Snake',
    'GameState', 'GameStatus',
]
