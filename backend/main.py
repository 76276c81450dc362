import argparse
import json
import logging
import random
from typing import Callable, Dict, List, Optional, Tuple, Any

from domain.constants import (
    VALID_MOVES, MOVE_DELTAS, OPPOSITE_MOVES,
    START, RUNNING, PAUSED, GAME_OVER,
    SIGNAL_STARTED, SIGNAL_PAUSED, SIGNAL_RESUMED, SIGNAL_ATE_FOOD,
    SIGNAL_RESET, SIGNAL_GAME_OVER,
    REASON_WALL, REASON_SELF, REASON_BOARD_FULL,
    BOARD_SIZE, INITIAL_SNAKE, INITIAL_FOOD, INITIAL_DIRECTION,
)
from domain.game_state import GameState
from domain.snake import Snake

logger = logging.getLogger(__name__)

Listener = Callable[[str, GameState], None]


class GameEngine:
    """
    Manages:
      - Board (fixed BOARD_SIZE x BOARD_SIZE)
      - Snake
      - Food
      - Direction
      - Score and high score
      - Lifecycle (START, RUNNING, PAUSED, GAME_OVER)

    All mutation goes through start/toggle_pause/reset/set_direction/tick.
    Listeners receive fire-and-forget signals; they never affect state.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.board_size = BOARD_SIZE
        self.rng = rng or random.Random()
        self.high_score = 0
        self.lifecycle = START
        self._listeners: List[Listener] = []
        self._init_board()

    def _init_board(self):
        self.snake = Snake(list(INITIAL_SNAKE))
        self.food: Tuple[int, int] = INITIAL_FOOD
        self.direction = INITIAL_DIRECTION
        # Direction used by the last tick; the reverse guard compares against it
        self._travel_direction = INITIAL_DIRECTION
        self.score = 0
        self.tick_number = 0

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, signal: str):
        if not self._listeners:
            return
        state = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(signal, state)
            except Exception:
                logger.warning("Listener %r failed on signal '%s'", listener, signal, exc_info=True)

    # ------------------------------------------------------------------
    # Lifecycle commands
    # ------------------------------------------------------------------

    def start(self):
        """(Re)start a game from the initial board, from any state."""
        self._init_board()
        self.lifecycle = RUNNING
        logger.info("Game started")
        self._emit(SIGNAL_STARTED)

    def toggle_pause(self) -> bool:
        """
        RUNNING -> PAUSED or PAUSED -> RUNNING.

        Returns False (and emits nothing) when there is no game to pause.
        """
        if self.lifecycle == RUNNING:
            self.lifecycle = PAUSED
            logger.info("Game paused at tick %d", self.tick_number)
            self._emit(SIGNAL_PAUSED)
            return True
        if self.lifecycle == PAUSED:
            self.lifecycle = RUNNING
            logger.info("Game resumed at tick %d", self.tick_number)
            self._emit(SIGNAL_RESUMED)
            return True

        logger.debug("Ignoring pause toggle in state %s", self.lifecycle)
        return False

    def pause(self) -> bool:
        if self.lifecycle != RUNNING:
            return False
        return self.toggle_pause()

    def resume(self) -> bool:
        if self.lifecycle != PAUSED:
            return False
        return self.toggle_pause()

    def reset(self):
        """Clear the board and go idle; the high score survives."""
        self._init_board()
        self.lifecycle = START
        logger.info("Game reset")
        self._emit(SIGNAL_RESET)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_direction(self, direction: str) -> bool:
        """
        Queue a direction for the next tick.

        Ignored unless the game is RUNNING, so a paused game stays frozen.
        Reversing onto the current direction of travel is silently dropped.
        Returns True when the direction was accepted.
        """
        if not isinstance(direction, str) or direction.upper() not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}. Expected one of {sorted(VALID_MOVES)}.")

        direction = direction.upper()
        if self.lifecycle != RUNNING:
            logger.debug("Ignoring direction %s while %s", direction, self.lifecycle)
            return False

        if direction == OPPOSITE_MOVES[self._travel_direction]:
            logger.debug("Dropping reverse direction %s (travelling %s)", direction, self._travel_direction)
            return False

        self.direction = direction
        return True

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> bool:
        """
        Advance one step:
          1) compute the new head from the current direction
          2) wall collision -> GAME_OVER
          3) self collision (against the pre-tick body) -> GAME_OVER
          4) move the head
          5) eat food: grow, score, respawn food
          6) otherwise drop the tail

        Returns False when nothing happened (not RUNNING) or the game ended.
        """
        if self.lifecycle != RUNNING:
            return False

        dx, dy = MOVE_DELTAS[self.direction]
        hx, hy = self.snake.head
        new_head = (hx + dx, hy + dy)
        self._travel_direction = self.direction

        if not self.in_bounds(new_head):
            self._end_game(REASON_WALL)
            return False

        # The tail cell is still occupied at check time, even though it
        # would be vacated by this move.
        if self.snake.occupies(new_head):
            self._end_game(REASON_SELF)
            return False

        eats = new_head == self.food
        self.snake.advance(new_head, grow=eats)
        self.tick_number += 1

        if eats:
            self.score += 1
            self.high_score = max(self.high_score, self.score)
            logger.debug("Ate food at %s, score=%d", new_head, self.score)

            food = self._random_free_cell()
            if food is None:
                self._emit(SIGNAL_ATE_FOOD)
                self._end_game(REASON_BOARD_FULL)
                return False
            self.food = food
            self._emit(SIGNAL_ATE_FOOD)

        return True

    def in_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self.board_size and 0 <= y < self.board_size

    def _random_free_cell(self) -> Optional[Tuple[int, int]]:
        """Return a uniformly random cell not occupied by the snake, or None."""
        occupied = set(self.snake.positions)
        free = [
            (x, y)
            for y in range(self.board_size)
            for x in range(self.board_size)
            if (x, y) not in occupied
        ]
        if not free:
            return None
        return self.rng.choice(free)

    def _end_game(self, reason: str):
        self.lifecycle = GAME_OVER
        self.snake.kill(reason, self.tick_number)
        self.high_score = max(self.high_score, self.score)
        logger.info("Game Over: %s (score=%d, high score=%d)", reason, self.score, self.high_score)
        self._emit(SIGNAL_GAME_OVER)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            board_size=self.board_size,
            snake=list(self.snake.positions),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            lifecycle=self.lifecycle,
            direction=self.direction,
            tick_number=self.tick_number,
            game_over_reason=self.snake.death_reason,
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.snapshot().print_board() + "\n")


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(player, game_params: argparse.Namespace, engine: Optional[GameEngine] = None) -> Dict[str, Any]:
    """
    Runs a single headless game driven by an autoplay player.

    Args:
        player: A Player instance choosing a direction every tick.
        game_params: An object (like argparse.Namespace) with max_ticks and
                     optionally seed and show_board.
        engine: Optional engine to reuse (keeps its high score).

    Returns:
        A dictionary summarizing the game.
    """
    if engine is None:
        seed = getattr(game_params, 'seed', None)
        engine = GameEngine(rng=random.Random(seed))

    max_ticks = game_params.max_ticks
    if max_ticks <= 0:
        raise ValueError(f"max_ticks must be positive, got {max_ticks}")
    show_board = getattr(game_params, 'show_board', False)

    engine.start()
    while engine.lifecycle == RUNNING and engine.tick_number < max_ticks:
        if show_board:
            engine.print_board()
        engine.set_direction(player.get_move(engine.snapshot()))
        engine.tick()

    final_state = engine.snapshot()
    return {
        "final_score": final_state.score,
        "high_score": final_state.high_score,
        "ticks": final_state.tick_number,
        "lifecycle": final_state.lifecycle,
        "game_over_reason": final_state.game_over_reason,
        "snake_length": len(final_state.snake),
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    from players import get_player_class, AVAILABLE_PLAYERS
    from settings import LOG_LEVEL, LOG_FORMAT

    parser = argparse.ArgumentParser(
        description="Run a headless Snake game driven by an autoplay player."
    )
    parser.add_argument("--player", type=str, default="greedy", choices=AVAILABLE_PLAYERS,
                        help="Autoplay player to use")
    parser.add_argument("--max-ticks", dest="max_ticks", type=int, default=500,
                        help="Stop the game after this many ticks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and player choices")
    parser.add_argument("--show-board", dest="show_board", action="store_true",
                        help="Print the board before every tick")

    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    player = get_player_class(args.player)(rng=random.Random(args.seed))
    result = run_simulation(player, args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
