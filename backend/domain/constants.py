"""
Game constants for Neon Snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: (0, 0) is the top left corner, y grows downward.
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Game settings
CELL_COUNT = 25  # 25x25 grid
APPLE_COUNT = 3
INITIAL_SPEED_MS = 120
POINTS_PER_APPLE = 10
INITIAL_SNAKE_LENGTH = 3
HISTORY_LIMIT = 500

HIGH_SCORE_KEY = "snakeHighScore"

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
