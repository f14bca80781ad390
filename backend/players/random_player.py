"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_DELTAS
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    Autopilot that picks a random heading avoiding walls and the body.
    """

    def __init__(self, name: str = None, rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng or random.Random()

    def safe_moves(self, game_state: GameState) -> List[str]:
        head_x, head_y = game_state.head
        # The tail counts as body: the engine treats tail-following as a collision
        body = set(game_state.snake)

        moves = []
        for move in self.candidate_moves(game_state):
            dx, dy = DIRECTION_DELTAS[move]
            if (head_x + dx, head_y + dy) not in body:
                moves.append(move)
        return moves

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        return self.rng.choice(valid_moves)
