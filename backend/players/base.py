"""
Input collaborators: anything that can choose the snake's next heading.
"""

from typing import List

from domain.constants import DIRECTION_DELTAS, OPPOSITE_DIRECTIONS
from domain.game_state import GameState


class Player:
    """
    Chooses a heading for the next tick from a snapshot of the board.

    Subclasses implement get_move(). The returned string goes through
    SnakeGame.set_heading, so reversals and unknown values never reach
    the engine.
    """

    def __init__(self, name: str = None):
        self.name = name or self.__class__.__name__

    def candidate_moves(self, game_state: GameState) -> List[str]:
        """
        Headings that keep the head on the board, sorted by name.

        The reverse of the current heading is left out since the engine
        would ignore it.
        """
        head_x, head_y = game_state.head
        reverse = OPPOSITE_DIRECTIONS[game_state.direction]

        moves = []
        for move, (dx, dy) in DIRECTION_DELTAS.items():
            if move == reverse:
                continue
            if game_state.in_bounds((head_x + dx, head_y + dy)):
                moves.append(move)
        return sorted(moves)

    def get_move(self, game_state: GameState) -> str:
        """Return "UP", "DOWN", "LEFT" or "RIGHT"."""
        raise NotImplementedError
