"""
Runtime settings for Snake Arcade.

Values come from the environment (optionally a .env file next to the
backend) and fall back to the defaults below. Board size is fixed and
lives in domain.constants.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from domain.constants import DEFAULT_TICK_INTERVAL_MS

BACKEND_ROOT = Path(__file__).resolve().parent

load_dotenv(BACKEND_ROOT / ".env")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


TICK_INTERVAL_MS = _env_int("SNAKE_TICK_INTERVAL_MS", DEFAULT_TICK_INTERVAL_MS)
LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

SOUNDS_DIR = Path(os.getenv("SNAKE_SOUNDS_DIR", str(BACKEND_ROOT / "sounds")))
AUDIO_ENABLED = _env_bool("SNAKE_AUDIO_ENABLED", True)

CELL_SIZE = _env_int("SNAKE_CELL_SIZE", 32)
FPS = _env_int("SNAKE_FPS", 30)

# How long the background driver loop sleeps between scheduler polls
SCHEDULER_LOOP_SLEEP_SECONDS = 0.01
