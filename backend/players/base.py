"""
Base player interface for the game engine.
"""

import random
from typing import List, Optional

from domain.constants import MOVE_DELTAS, OPPOSITE_MOVES
from domain.game_state import GameState


class Player:
    """
    Base class/interface for autoplay logic.

    A player returns the direction the snake should take on the next tick
    given the current game state.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError

    @staticmethod
    def safe_moves(game_state: GameState) -> List[str]:
        """
        Moves that neither leave the board, hit the body nor reverse.

        The tail counts as occupied because the engine checks collisions
        against the body before it moves.
        """
        head_x, head_y = game_state.head
        reverse = OPPOSITE_MOVES[game_state.direction]

        moves = []
        for move, (dx, dy) in MOVE_DELTAS.items():
            if move == reverse:
                continue
            new_x, new_y = head_x + dx, head_y + dy
            if not (0 <= new_x < game_state.board_size and 0 <= new_y < game_state.board_size):
                continue
            if (new_x, new_y) in game_state.snake:
                continue
            moves.append(move)

        # Keep a stable order so seeded players are reproducible
        return sorted(moves)
