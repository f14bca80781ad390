"""
Exceptions raised by the game engine.

Losing is not an error: a collision moves the game into the GAME_OVER state.
"""


class InvalidDirectionError(ValueError):
    """Raised when a direction is not one of UP, DOWN, LEFT, RIGHT."""

    def __init__(self, direction):
        super().__init__(f"Invalid direction: {direction!r}")
        self.direction = direction


class BoardFullError(RuntimeError):
    """Raised when no free cell is left to place an apple on."""
