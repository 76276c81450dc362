"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from typing import Any, Dict, Iterable, Optional, Tuple


class GameState:
    """
    A snapshot of the game handed to renderers, players and listeners.

    Attributes:
        board_size: width and height of the square board
        snake: tuple of (x, y) from head to tail
        food: (x, y) position of the food
        score: points scored since the last start/reset
        high_score: best score seen by this engine
        lifecycle: one of START, RUNNING, PAUSED, GAME_OVER
        direction: direction the next tick will move in
        tick_number: successful ticks since the last start/reset
        game_over_reason: 'wall', 'self', 'board_full' or None
    """

    __slots__ = (
        "board_size",
        "snake",
        "food",
        "score",
        "high_score",
        "lifecycle",
        "direction",
        "tick_number",
        "game_over_reason",
    )

    def __init__(
        self,
        board_size: int,
        snake: Iterable[Tuple[int, int]],
        food: Tuple[int, int],
        score: int,
        high_score: int,
        lifecycle: str,
        direction: str,
        tick_number: int = 0,
        game_over_reason: Optional[str] = None
    ):
        self.board_size = board_size
        self.snake = tuple(tuple(cell) for cell in snake)
        self.food = tuple(food)
        self.score = score
        self.high_score = high_score
        self.lifecycle = lifecycle
        self.direction = direction
        self.tick_number = tick_number
        self.game_over_reason = game_over_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    def cell_kind(self, x: int, y: int) -> str:
        """Return 'head', 'snake', 'food' or 'empty' for a board cell."""
        if (x, y) == self.head:
            return "head"
        if (x, y) in self.snake:
            return "snake"
        if (x, y) == self.food:
            return "food"
        return "empty"

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row 0 is printed first (top of the board), x-axis labels at bottom.
        """
        symbols = {"head": "H", "snake": "S", "food": "F", "empty": "."}

        result = []
        for y in range(self.board_size):
            row = [symbols[self.cell_kind(x, y)] for x in range(self.board_size)]
            result.append(f"{y:2d} {' '.join(row)}")

        result.append("   " + " ".join(str(i) for i in range(self.board_size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "board_size": self.board_size,
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "score": self.score,
            "high_score": self.high_score,
            "lifecycle": self.lifecycle,
            "direction": self.direction,
            "tick_number": self.tick_number,
            "game_over_reason": self.game_over_reason,
        }

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, lifecycle={self.lifecycle}, "
            f"food={self.food}, length={len(self.snake)}, score={self.score}>"
        )
