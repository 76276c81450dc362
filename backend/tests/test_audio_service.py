"""
Tests for the audio service. The pygame mixer is mocked throughout.
"""

import sys
import os
from pathlib import Path
from unittest.mock import MagicMock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import (
    SIGNAL_STARTED, SIGNAL_PAUSED, SIGNAL_RESUMED, SIGNAL_ATE_FOOD,
    SIGNAL_RESET, SIGNAL_GAME_OVER, RUNNING,
)
from main import GameEngine
from services.audio_service import AudioService, SOUND_FILES


def make_mixer(initialized=True):
    mixer = MagicMock()
    mixer.get_init.return_value = initialized
    return mixer


class TestAudioService:
    def test_signal_plays_mapped_sound(self):
        mixer = make_mixer()
        audio = AudioService(sounds_dir=Path("/sounds"), enabled=True, mixer=mixer)

        assert audio.handle_signal(SIGNAL_ATE_FOOD) is True

        mixer.Sound.assert_called_once_with(str(Path("/sounds") / "eat.mp3"))
        mixer.Sound.return_value.play.assert_called_once()

    def test_pause_and_resume_share_a_sound(self):
        assert SOUND_FILES[SIGNAL_PAUSED] == SOUND_FILES[SIGNAL_RESUMED] == "pause.mp3"
        assert SOUND_FILES[SIGNAL_STARTED] == "start.mp3"
        assert SOUND_FILES[SIGNAL_RESET] == "reset.mp3"

    def test_sounds_are_cached(self):
        mixer = make_mixer()
        audio = AudioService(sounds_dir=Path("/sounds"), enabled=True, mixer=mixer)

        audio.handle_signal(SIGNAL_PAUSED)
        audio.handle_signal(SIGNAL_RESUMED)

        mixer.Sound.assert_called_once()
        assert mixer.Sound.return_value.play.call_count == 2

    def test_mixer_is_initialized_once(self):
        mixer = make_mixer(initialized=False)
        audio = AudioService(enabled=True, mixer=mixer)

        audio.handle_signal(SIGNAL_STARTED)
        audio.handle_signal(SIGNAL_RESET)

        mixer.init.assert_called_once()

    def test_unmapped_signal_is_silent(self):
        mixer = make_mixer()
        audio = AudioService(enabled=True, mixer=mixer)

        assert audio.handle_signal(SIGNAL_GAME_OVER) is False
        mixer.Sound.assert_not_called()

    def test_disabled_service_is_silent(self):
        mixer = make_mixer()
        audio = AudioService(enabled=False, mixer=mixer)

        assert audio.handle_signal(SIGNAL_STARTED) is False
        mixer.init.assert_not_called()
        mixer.Sound.assert_not_called()

    def test_mixer_failure_disables_audio(self):
        mixer = make_mixer(initialized=False)
        mixer.init.side_effect = RuntimeError("No available audio device")
        audio = AudioService(enabled=True, mixer=mixer)

        assert audio.handle_signal(SIGNAL_STARTED) is False
        assert audio.handle_signal(SIGNAL_STARTED) is False
        mixer.init.assert_called_once()

    def test_missing_asset_is_not_retried(self):
        mixer = make_mixer()
        mixer.Sound.side_effect = FileNotFoundError("eat.mp3")
        audio = AudioService(enabled=True, mixer=mixer)

        assert audio.handle_signal(SIGNAL_ATE_FOOD) is False
        assert audio.handle_signal(SIGNAL_ATE_FOOD) is False
        mixer.Sound.assert_called_once()

    def test_playback_failure_does_not_reach_engine(self):
        mixer = make_mixer()
        mixer.Sound.return_value.play.side_effect = RuntimeError("device busy")
        audio = AudioService(enabled=True, mixer=mixer)
        engine = GameEngine()
        engine.add_listener(audio.handle_signal)

        engine.start()
        engine.tick()

        assert engine.lifecycle == RUNNING
        assert engine.snake.head == (1, 0)

    def test_close_shuts_down_mixer(self):
        mixer = make_mixer()
        audio = AudioService(enabled=True, mixer=mixer)
        audio.handle_signal(SIGNAL_STARTED)

        audio.close()

        mixer.quit.assert_called_once()
