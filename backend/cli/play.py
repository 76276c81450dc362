#!/usr/bin/env python3
"""Play Snake Arcade in a desktop window.

Controls:
    Arrow keys  change direction
    SPACE       start / restart
    P           pause / resume
    R           reset
    ESC         quit

Usage:

    python backend/cli/play.py
    python backend/cli/play.py --tick-ms 150 --cell-size 40 --mute
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

# Ensure backend modules are importable
BACKEND_ROOT = Path(__file__).resolve().parent.parent
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from domain.constants import UP, DOWN, LEFT, RIGHT  # noqa: E402
from services.audio_service import AudioService  # noqa: E402
from services.board_renderer import BoardRenderer  # noqa: E402
from services.game_session import GameSession  # noqa: E402
from settings import (  # noqa: E402
    AUDIO_ENABLED,
    CELL_SIZE,
    FPS,
    LOG_FORMAT,
    LOG_LEVEL,
    TICK_INTERVAL_MS,
)


logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[int, str] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

KEY_COMMANDS: Dict[int, str] = {
    pygame.K_SPACE: "start",
    pygame.K_p: "toggle_pause",
    pygame.K_r: "reset",
}


def key_to_command(key: int) -> Optional[Tuple[str, tuple]]:
    """Translate a pygame key code into a session command, or None."""
    if key in KEY_DIRECTIONS:
        return ("set_direction", (KEY_DIRECTIONS[key],))
    if key in KEY_COMMANDS:
        return (KEY_COMMANDS[key], ())
    return None


def run_window(session: GameSession, renderer: BoardRenderer, fps: int = FPS) -> None:
    screen = pygame.display.set_mode(renderer.image_size)
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                command = key_to_command(event.key)
                if command is not None:
                    name, args = command
                    session.submit(name, *args)

        # Commands are applied here, then the tick runs if due
        session.driver.run_pending()

        frame = renderer.render(session.latest)
        surface = pygame.image.frombuffer(frame.tobytes(), frame.size, "RGB")
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock.tick(fps)


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Snake in a desktop window.")
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=TICK_INTERVAL_MS,
        help=f"Milliseconds between snake moves (default: {TICK_INTERVAL_MS})",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=CELL_SIZE,
        help=f"Cell size in pixels (default: {CELL_SIZE})",
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Disable sound effects",
    )

    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    if args.tick_ms <= 0:
        raise SystemExit(f"--tick-ms must be positive, got {args.tick_ms}")

    pygame.init()
    session = GameSession(interval_ms=args.tick_ms)
    renderer = BoardRenderer(cell_size=args.cell_size)
    audio = AudioService(enabled=AUDIO_ENABLED and not args.mute)
    session.engine.add_listener(audio.handle_signal)

    logger.info("Window open: SPACE to start, arrows to steer, P to pause, R to reset")
    try:
        run_window(session, renderer)
    finally:
        session.close()
        audio.close()
        pygame.quit()

    logger.info("Session over. High score: %d", session.latest.high_score)


if __name__ == "__main__":
    main()
