"""
Game constants for Snake Arcade.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (dx, dy) per direction; y grows downward so UP decreases y
MOVE_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_MOVES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Lifecycle states
START = "START"
RUNNING = "RUNNING"
PAUSED = "PAUSED"
GAME_OVER = "GAME_OVER"
LIFECYCLE_STATES = {START, RUNNING, PAUSED, GAME_OVER}

# Signals emitted to collaborators (audio, UI)
SIGNAL_STARTED = "started"
SIGNAL_PAUSED = "paused"
SIGNAL_RESUMED = "resumed"
SIGNAL_ATE_FOOD = "ate_food"
SIGNAL_RESET = "reset"
SIGNAL_GAME_OVER = "game_over"

# Game-over reasons
REASON_WALL = "wall"
REASON_SELF = "self"
REASON_BOARD_FULL = "board_full"

# Game settings
BOARD_SIZE = 10
INITIAL_SNAKE = [(0, 0)]
INITIAL_FOOD = (5, 5)
INITIAL_DIRECTION = RIGHT
DEFAULT_TICK_INTERVAL_MS = 200
