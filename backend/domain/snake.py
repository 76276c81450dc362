"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self', 'board_full'
        death_tick: The tick number when the snake died
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    def occupies(self, cell: Tuple[int, int]) -> bool:
        return cell in self.positions

    def advance(self, new_head: Tuple[int, int], grow: bool = False) -> None:
        """Prepend new_head and drop the tail unless the snake is growing."""
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()

    def kill(self, reason: str, tick_number: int) -> None:
        self.alive = False
        self.death_reason = reason
        self.death_tick = tick_number

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self)}, head={self.head}, alive={self.alive}>"
