"""
Greedy player - heads straight for the food whenever it is safe to.
"""

from domain.constants import MOVE_DELTAS
from domain.game_state import GameState
from .random_player import RandomPlayer


class GreedyPlayer(RandomPlayer):
    """
    Picks the safe move that minimises Manhattan distance to the food.
    Ties are broken randomly; with no safe move it behaves like RandomPlayer.
    """

    def get_move(self, game_state: GameState) -> str:
        valid_moves = self.safe_moves(game_state)
        if not valid_moves:
            return super().get_move(game_state)

        head_x, head_y = game_state.head
        food_x, food_y = game_state.food

        def distance(move: str) -> int:
            dx, dy = MOVE_DELTAS[move]
            return abs(head_x + dx - food_x) + abs(head_y + dy - food_y)

        best = min(distance(move) for move in valid_moves)
        return self.rng.choice([move for move in valid_moves if distance(move) == best])
