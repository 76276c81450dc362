"""
Single-writer session around a GameEngine.

Input handlers on any thread only enqueue commands. The thread that calls
TickDriver.run_pending() drains the queue into the engine before any due
tick, keeps the tick job scheduled exactly while the game is RUNNING and
publishes a fresh snapshot in `latest` after every mutation.
"""

import logging
import queue
from typing import Optional, Tuple

from domain.constants import RUNNING
from domain.game_state import GameState
from main import GameEngine
from services.tick_scheduler import TickDriver
from settings import TICK_INTERVAL_MS


logger = logging.getLogger(__name__)

COMMANDS = {"start", "toggle_pause", "reset", "set_direction"}


class GameSession:
    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        interval_ms: int = TICK_INTERVAL_MS,
        driver: Optional[TickDriver] = None
    ):
        self.engine = engine or GameEngine()
        self.driver = driver or TickDriver(
            on_tick=self._on_tick,
            interval_ms=interval_ms,
            on_pump=self.process_commands,
        )
        self._commands: "queue.Queue[Tuple[str, tuple]]" = queue.Queue()
        self.latest: GameState = self.engine.snapshot()

    # ------------------------------------------------------------------
    # Command surface (safe from any thread)
    # ------------------------------------------------------------------

    def submit(self, command: str, *args) -> None:
        if command not in COMMANDS:
            raise ValueError(f"Unknown command '{command}'. Expected one of {sorted(COMMANDS)}.")
        self._commands.put((command, args))

    def start(self) -> None:
        self.submit("start")

    def toggle_pause(self) -> None:
        self.submit("toggle_pause")

    def reset(self) -> None:
        self.submit("reset")

    def set_direction(self, direction: str) -> None:
        self.submit("set_direction", direction)

    # ------------------------------------------------------------------
    # Writer side (driver thread only)
    # ------------------------------------------------------------------

    def process_commands(self) -> int:
        """Apply every queued command; returns how many were applied."""
        applied = 0
        while True:
            try:
                command, args = self._commands.get_nowait()
            except queue.Empty:
                break

            try:
                getattr(self.engine, command)(*args)
            except ValueError as e:
                logger.warning(f"Dropping command {command}{args}: {e}")
            applied += 1

        if applied:
            self._sync()
        return applied

    def _on_tick(self) -> None:
        self.engine.tick()
        self._sync()

    def _sync(self) -> None:
        if self.engine.lifecycle == RUNNING:
            self.driver.start_ticking()
        else:
            self.driver.stop_ticking()
        self.latest = self.engine.snapshot()

    # ------------------------------------------------------------------
    # Background mode
    # ------------------------------------------------------------------

    def run_in_background(self) -> None:
        self.driver.start()

    def close(self) -> None:
        self.driver.stop()
