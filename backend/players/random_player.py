"""
Random player implementation - picks random safe moves.
"""

from domain.constants import OPPOSITE_MOVES, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)

        # If no valid moves, pick any non-reverse move (we'll die anyway)
        if not valid_moves:
            reverse = OPPOSITE_MOVES[game_state.direction]
            return self.rng.choice(sorted(VALID_MOVES - {reverse}))

        return self.rng.choice(valid_moves)
