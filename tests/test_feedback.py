import unittest
from unittest.mock import patch
import sys
import os

# Project root on the import path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from scrambled_keypad.core.feedback import SoundHaptics


class TestSoundHaptics(unittest.TestCase):
    def setUp(self):
        # Replace the pygame module seen by feedback.py for each test
        patcher = patch("scrambled_keypad.core.feedback.pygame")
        self.mock_pygame = patcher.start()
        self.addCleanup(patcher.stop)

        self.mock_pygame.mixer.get_init.return_value = True
        self.haptics = SoundHaptics()

    def test_init_starts_mixer(self):
        self.mock_pygame.mixer.init.assert_called_once()

    def test_vibrate_plays_tap(self):
        with patch("scrambled_keypad.core.feedback.os.path.exists", return_value=True):
            self.haptics.vibrate(True)

        self.mock_pygame.mixer.Sound.assert_called_once()
        self.mock_pygame.mixer.find_channel.return_value.play.assert_called_once()

    def test_disabled_is_silent(self):
        with patch("scrambled_keypad.core.feedback.os.path.exists", return_value=True):
            self.haptics.vibrate(False)

        self.mock_pygame.mixer.Sound.assert_not_called()

    def test_cooldown(self):
        channel = self.mock_pygame.mixer.find_channel.return_value
        with patch("scrambled_keypad.core.feedback.os.path.exists", return_value=True), \
                patch("scrambled_keypad.core.feedback.time.time", side_effect=[100.0, 100.01, 101.0]):
            self.haptics.vibrate(True)
            self.haptics.vibrate(True)
            self.haptics.vibrate(True)

        self.assertEqual(channel.play.call_count, 2)
        # Sound object is cached between taps
        self.assertEqual(self.mock_pygame.mixer.Sound.call_count, 1)

    def test_missing_file_is_silent(self):
        with patch("scrambled_keypad.core.feedback.os.path.exists", return_value=False):
            self.haptics.vibrate(True)

        self.mock_pygame.mixer.Sound.assert_not_called()

    def test_mixer_not_ready(self):
        self.mock_pygame.mixer.get_init.return_value = False
        self.haptics.vibrate(True)
        self.mock_pygame.mixer.Sound.assert_not_called()

    def test_playback_failure_does_not_raise(self):
        self.mock_pygame.mixer.Sound.side_effect = RuntimeError("device busy")
        with patch("scrambled_keypad.core.feedback.os.path.exists", return_value=True):
            self.haptics.vibrate(True)
        self.mock_pygame.mixer.find_channel.return_value.play.assert_not_called()


class TestSoundHapticsIsolation(unittest.TestCase):
    def test_module_keeps_its_pygame_binding(self):
        # Patching must not leave a mock behind for other test modules
        import pygame
        import scrambled_keypad.core.feedback as feedback
        with patch("scrambled_keypad.core.feedback.pygame"):
            pass
        self.assertIs(feedback.pygame, pygame)


if __name__ == "__main__":
    unittest.main()
