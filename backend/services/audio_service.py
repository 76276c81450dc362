"""
Audio service - plays sound effects for engine signals.

Register AudioService.handle_signal as an engine listener. Playback is
fire-and-forget: a missing mixer, a missing asset or a playback error is
logged and never reaches the engine.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Set

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from domain.constants import (  # noqa: E402
    SIGNAL_STARTED,
    SIGNAL_PAUSED,
    SIGNAL_RESUMED,
    SIGNAL_ATE_FOOD,
    SIGNAL_RESET,
)
from domain.game_state import GameState  # noqa: E402
from settings import AUDIO_ENABLED, SOUNDS_DIR  # noqa: E402


logger = logging.getLogger(__name__)

SOUND_FILES: Dict[str, str] = {
    SIGNAL_STARTED: "start.mp3",
    SIGNAL_PAUSED: "pause.mp3",
    SIGNAL_RESUMED: "pause.mp3",
    SIGNAL_ATE_FOOD: "eat.mp3",
    SIGNAL_RESET: "reset.mp3",
}


class AudioService:
    """Owns the mixer and the loaded sounds; nothing else touches them."""

    def __init__(
        self,
        sounds_dir: Path = SOUNDS_DIR,
        enabled: bool = AUDIO_ENABLED,
        mixer=None
    ):
        self.sounds_dir = Path(sounds_dir)
        self.enabled = enabled
        self.mixer = mixer or pygame.mixer
        self._sounds: Dict[str, object] = {}
        self._failed: Set[str] = set()
        self._mixer_ready: Optional[bool] = None

    def _ensure_mixer(self) -> bool:
        if self._mixer_ready is None:
            try:
                if not self.mixer.get_init():
                    self.mixer.init()
                self._mixer_ready = True
            except Exception as e:
                logger.warning(f"Audio disabled, mixer could not start: {e}")
                self._mixer_ready = False
        return self._mixer_ready

    def _load(self, filename: str):
        if filename in self._sounds:
            return self._sounds[filename]
        if filename in self._failed:
            return None

        path = self.sounds_dir / filename
        try:
            sound = self.mixer.Sound(str(path))
        except Exception as e:
            logger.warning(f"Could not load sound {path}: {e}")
            self._failed.add(filename)
            return None

        self._sounds[filename] = sound
        return sound

    def handle_signal(self, signal: str, game_state: Optional[GameState] = None) -> bool:
        """
        Play the sound bound to a signal.

        Returns True if playback was started, False otherwise.
        """
        filename = SOUND_FILES.get(signal)
        if not self.enabled or filename is None:
            return False
        if not self._ensure_mixer():
            return False

        sound = self._load(filename)
        if sound is None:
            return False

        try:
            sound.play()
        except Exception as e:
            logger.warning(f"Playback of {filename} failed: {e}")
            return False
        return True

    def close(self) -> None:
        self._sounds.clear()
        if self._mixer_ready:
            try:
                self.mixer.quit()
            except Exception as e:
                logger.warning(f"Mixer shutdown failed: {e}")
        self._mixer_ready = None
