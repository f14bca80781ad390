"""
Player implementations for Neon Snake.

Players stand in for the keyboard or touch input: each one looks at the
current state and returns the direction it wants for the next tick.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
