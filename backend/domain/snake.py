"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple

Cell = Tuple[int, int]


class Snake:
    """
    Represents the snake's body on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: Iterable[Cell]):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("A snake needs at least one cell.")

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def occupies(self, cell: Cell) -> bool:
        return cell in self.positions

    def advance(self, new_head: Cell, grow: bool) -> None:
        """Prepend the new head and drop the tail unless the snake grows."""
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()
