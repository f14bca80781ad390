"""
Game engine for Neon Snake.

The rules live in a handful of pure functions (step, set_heading,
generate_food, reset) that take a GameState and return a new one.
SnakeGame is the single owner of the live state: it merges input into the
next tick's heading, drives step() once per tick and persists the high score.

Collision rule: the new head is checked against the whole pre-move body,
tail included. Moving onto the cell the tail is about to vacate is therefore
a self-collision, which is stricter than most Snake variants.
"""

import logging
import random
import threading
import uuid
from collections import deque
from typing import Iterable, List, Optional, Tuple, Dict, Any

from config import GameConfig, load_config
from domain.constants import (
    UP,
    VALID_MOVES,
    DIRECTION_DELTAS,
    OPPOSITE_DIRECTIONS,
    POINTS_PER_APPLE,
    INITIAL_SNAKE_LENGTH,
    HISTORY_LIMIT,
    DEATH_WALL,
    DEATH_SELF,
)
from domain.errors import BoardFullError, InvalidDirectionError
from domain.game_state import GameState, GameStatus
from domain.snake import Snake

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


# -------------------------------
# Pure rules
# -------------------------------

def validate_direction(direction: Any) -> str:
    """Normalize a direction string, raising InvalidDirectionError if unknown."""
    if not isinstance(direction, str):
        raise InvalidDirectionError(direction)
    normalized = direction.strip().upper()
    if normalized not in VALID_MOVES:
        raise InvalidDirectionError(direction)
    return normalized


def is_reverse(current: str, requested: str) -> bool:
    return OPPOSITE_DIRECTIONS[current] == requested


def initial_snake(grid_size: int, length: int = INITIAL_SNAKE_LENGTH) -> List[Cell]:
    """
    Starting body: head at the centre of the board, body hanging below it.

    On the default 25x25 board this is [(12, 12), (12, 13), (12, 14)].
    """
    center = grid_size // 2
    length = min(length, grid_size - center)
    return [(center, center + i) for i in range(length)]


def generate_food(
    snake: Iterable[Cell],
    existing_food: Iterable[Cell],
    grid_size: int,
    rng: Optional[random.Random] = None
) -> Cell:
    """
    Return a random cell (x, y) not occupied by the snake or another apple.

    Uniform rejection sampling: keeps drawing until a free cell comes up, so
    it slows down as the board fills. Raises BoardFullError when there is no
    free cell left at all.
    """
    rng = rng or random
    occupied = set(snake) | set(existing_food)
    if len(occupied) >= grid_size * grid_size:
        raise BoardFullError(f"No free cell left on a {grid_size}x{grid_size} board")

    while True:
        candidate = (rng.randrange(grid_size), rng.randrange(grid_size))
        if candidate not in occupied:
            return candidate


def spawn_apples(
    snake: Iterable[Cell],
    count: int,
    grid_size: int,
    rng: Optional[random.Random] = None
) -> List[Cell]:
    """Sample a full apple set, each apple disjoint from the snake and the others."""
    snake = list(snake)
    apples: List[Cell] = []
    for _ in range(count):
        apples.append(generate_food(snake, apples, grid_size, rng))
    return apples


def set_heading(state: GameState, requested: str) -> GameState:
    """
    Return a state heading in the requested direction.

    A request for the exact opposite of the current heading is ignored,
    since it would run the head straight into the neck.
    """
    requested = validate_direction(requested)
    if is_reverse(state.direction, requested) or requested == state.direction:
        return state
    return state.copy(direction=requested)


def step(
    state: GameState,
    heading: Optional[str] = None,
    rng: Optional[random.Random] = None
) -> GameState:
    """
    Advance the game by one tick.

    1) Paused or finished games are returned unchanged
    2) Apply the heading unless it reverses the current one
    3) Wall or body collision ends the game, nothing else changes
    4) Prepend the new head
    5) On an apple: score, raise the high score, replace the apple, keep the tail
       Otherwise: drop the tail
    """
    if state.game_over or state.paused:
        return state

    if heading is not None:
        state = set_heading(state, heading)

    snake = Snake(state.snake)
    dx, dy = DIRECTION_DELTAS[state.direction]
    hx, hy = snake.head
    new_head = (hx + dx, hy + dy)

    if not state.in_bounds(new_head):
        logger.info(f"Snake hit the wall at {new_head} on tick {state.tick}")
        return state.copy(game_over=True, death_reason=DEATH_WALL)

    # Checked against the full pre-move body, tail included
    if snake.occupies(new_head):
        logger.info(f"Snake ran into itself at {new_head} on tick {state.tick}")
        return state.copy(game_over=True, death_reason=DEATH_SELF)

    apples = list(state.apples)
    score = state.score
    high_score = state.high_score

    eats_apple = new_head in apples
    snake.advance(new_head, grow=eats_apple)

    if eats_apple:
        score += POINTS_PER_APPLE
        high_score = max(high_score, score)
        eaten_index = apples.index(new_head)
        try:
            apples[eaten_index] = generate_food(snake.positions, apples, state.grid_size, rng)
        except BoardFullError:
            # Nowhere left to put it; the board shrinks to fewer apples
            logger.warning("Board is full, not replacing the eaten apple")
            del apples[eaten_index]

    return state.copy(
        snake=list(snake.positions),
        apples=apples,
        score=score,
        high_score=high_score,
        tick=state.tick + 1,
    )


def new_game(
    config: GameConfig,
    high_score: int = 0,
    rng: Optional[random.Random] = None,
    paused: bool = True
) -> GameState:
    """Build a fresh game. Games start idle (paused) until the player resumes."""
    snake = initial_snake(config.grid_size, config.initial_length)
    apples = spawn_apples(snake, config.apple_count, config.grid_size, rng)
    return GameState(
        snake=snake,
        apples=apples,
        direction=UP,
        grid_size=config.grid_size,
        score=0,
        high_score=high_score,
        game_over=False,
        paused=paused,
    )


def reset(
    config: GameConfig,
    high_score: int = 0,
    rng: Optional[random.Random] = None
) -> GameState:
    """Start over: initial snake, heading UP, score 0, flags cleared, new apples."""
    return new_game(config, high_score=high_score, rng=rng, paused=False)


# -------------------------------
# Game context
# -------------------------------

class SnakeGame:
    """
    Owns:
      - The current GameState
      - The heading requested for the next tick
      - The random source used for apple placement
      - The high score store
      - A bounded history of snapshots for replay

    Every mutation goes through a lock, so input handlers and the clock
    thread can share one instance.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        high_score_store=None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None
    ):
        self.config = config or load_config()
        self.rng = rng or random.Random(seed)

        if high_score_store is None:
            from data_access.high_score import HighScoreStore
            high_score_store = HighScoreStore(self.config.high_score_key)
        self.high_score_store = high_score_store

        self._lock = threading.RLock()
        self.game_id = str(uuid.uuid4())
        self.pending_direction: Optional[str] = None
        self.history: deque = deque(maxlen=HISTORY_LIMIT)

        # Read once at startup
        stored_high_score = self.high_score_store.load()
        self.state = new_game(self.config, high_score=stored_high_score, rng=self.rng)
        self.record_history()

        logger.info(
            f"Game {self.game_id} ready on a {self.config.grid_size}x{self.config.grid_size} "
            f"board with {self.config.apple_count} apples (high score {stored_high_score})"
        )

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def get_current_state(self) -> GameState:
        """Return a snapshot of the current board."""
        with self._lock:
            return self.state.copy()

    def set_heading(self, direction: str) -> bool:
        """
        Queue a heading for the next tick.

        The reverse check uses the heading in effect now, not an earlier
        request from the same tick; the latest accepted request wins.
        Returns False when the request was ignored as a reversal.
        """
        direction = validate_direction(direction)
        with self._lock:
            if is_reverse(self.state.direction, direction):
                return False
            self.pending_direction = direction
            return True

    def tick(self) -> GameState:
        """Advance one tick. Does nothing while paused or after game over."""
        with self._lock:
            if self.state.status != GameStatus.RUNNING:
                return self.state

            previous = self.state
            heading = self.pending_direction or previous.direction
            self.pending_direction = None
            self.state = step(previous, heading, rng=self.rng)

            if self.state.high_score > previous.high_score:
                logger.info(f"New high score: {self.state.high_score}")
                self.high_score_store.save(self.state.high_score)

            if self.state.game_over:
                logger.info(
                    f"Game {self.game_id} over ({self.state.death_reason}) "
                    f"after {self.state.tick} ticks, score {self.state.score}"
                )

            self.record_history()
            return self.state

    def toggle_pause(self) -> GameState:
        with self._lock:
            if self.state.game_over:
                return self.state
            return self._set_paused(not self.state.paused)

    def pause(self) -> GameState:
        with self._lock:
            if self.state.game_over:
                return self.state
            return self._set_paused(True)

    def resume(self) -> GameState:
        with self._lock:
            if self.state.game_over:
                return self.state
            return self._set_paused(False)

    def _set_paused(self, paused: bool) -> GameState:
        if self.state.paused != paused:
            self.state = self.state.copy(paused=paused)
            logger.info("Game paused" if paused else "Game resumed")
        return self.state

    def reset(self) -> GameState:
        """Replace the state with a fresh, running game. The high score carries over."""
        with self._lock:
            self.state = reset(self.config, high_score=self.state.high_score, rng=self.rng)
            self.pending_direction = None
            self.game_id = str(uuid.uuid4())
            self.history.clear()
            self.record_history()
            logger.info(f"Game reset, new game id {self.game_id}")
            return self.state

    def record_history(self):
        self.history.append(self.state)

    def serialize_history(self) -> List[Dict[str, Any]]:
        """Convert the recorded snapshots to a JSON-serializable list of dicts."""
        with self._lock:
            return [state.to_dict() for state in self.history]

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")
