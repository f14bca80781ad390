"""
GameState entity - a snapshot of the game at a point in time.
"""

from enum import Enum
from typing import List, Tuple, Optional, Dict, Any

Cell = Tuple[int, int]


class GameStatus(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameState:
    """
    A snapshot of the game at a specific point in time.

    States are treated as values: the engine never mutates one in place,
    it builds a new state with copy().

    Attributes:
        snake: list of (x, y) from head at index 0 to tail at the end
        apples: list of (x, y) positions of all apples on the board
        direction: heading in effect for the next tick
        score: points scored in the current game
        high_score: best score seen across games
        game_over: set once the snake hits a wall or itself
        paused: set while the game is idle
        tick: number of ticks that moved the snake
        grid_size: board is grid_size x grid_size cells
        death_reason: 'wall' or 'self' once the game is over
    """

    def __init__(
        self,
        snake: List[Cell],
        apples: List[Cell],
        direction: str,
        grid_size: int,
        score: int = 0,
        high_score: int = 0,
        game_over: bool = False,
        paused: bool = True,
        tick: int = 0,
        death_reason: Optional[str] = None
    ):
        self.snake = list(snake)
        self.apples = list(apples)
        self.direction = direction
        self.grid_size = grid_size
        self.score = score
        self.high_score = high_score
        self.game_over = game_over
        self.paused = paused
        self.tick = tick
        self.death_reason = death_reason

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def status(self) -> GameStatus:
        if self.game_over:
            return GameStatus.GAME_OVER
        if self.paused:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def copy(self, **changes) -> "GameState":
        """Return a new state with the given attributes replaced."""
        values = {
            "snake": self.snake,
            "apples": self.apples,
            "direction": self.direction,
            "grid_size": self.grid_size,
            "score": self.score,
            "high_score": self.high_score,
            "game_over": self.game_over,
            "paused": self.paused,
            "tick": self.tick,
            "death_reason": self.death_reason,
        }
        values.update(changes)
        return GameState(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the state to a JSON-serializable dictionary."""
        return {
            "snake": [list(cell) for cell in self.snake],
            "apples": [list(cell) for cell in self.apples],
            "direction": self.direction,
            "score": self.score,
            "high_score": self.high_score,
            "game_over": self.game_over,
            "paused": self.paused,
            "status": self.status.value,
            "tick": self.tick,
            "grid_size": self.grid_size,
            "death_reason": self.death_reason,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        H = snake head
        S = snake body
        Rows are printed top to bottom, with (0,0) at top left
        and x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        for ax, ay in self.apples:
            board[ay][ax] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake):
            if not self.in_bounds((x, y)):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'S'

        result = []
        for y in range(self.grid_size):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Columns past 9 only show their last digit to keep the grid aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, status={self.status.value}, "
            f"score={self.score}, length={len(self.snake)}, apples={self.apples}>"
        )
