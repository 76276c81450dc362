"""
Domain entities for the Snake Arcade game engine.

This module contains the core game entities that are independent of
presentation concerns (rendering, audio, input wiring).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, MOVE_DELTAS, OPPOSITE_MOVES,
    START, RUNNING, PAUSED, GAME_OVER, LIFECYCLE_STATES,
    BOARD_SIZE, INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION,
)
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'MOVE_DELTAS', 'OPPOSITE_MOVES',
    'START', 'RUNNING', 'PAUSED', 'GAME_OVER', 'LIFECYCLE_STATES',
    'BOARD_SIZE', 'INITIAL_SNAKE', 'INITIAL_FOOD', 'INITIAL_DIRECTION',
    'Snake',
    'GameState',
]
