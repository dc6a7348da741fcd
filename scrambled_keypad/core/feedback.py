import pygame
import time
import os
from scrambled_keypad.paths import get_resource_path
from scrambled_keypad.core.config_loader import ConfigLoader
from scrambled_keypad.core.interfaces import IHapticsEngine


class SoundHaptics(IHapticsEngine):
    """
    Desktop stand-in for a vibration motor: a short tap sound per key press.
    Fire-and-forget; failures are reported and never reach the keypad.
    """

    def __init__(self):
        self.config = ConfigLoader().audio
        self.cooldown = self.config.get("se_cooldown", 0.05)
        self.tap_sound = self.config.get("tap_sound", "tap")
        self._last_se_time = 0
        self._sound_cache = {}

        try:
            pygame.mixer.init()
        except Exception as e:
            print(f"Audio init failed: {e}")

    def vibrate(self, enabled: bool):
        if enabled:
            self.play_se(self.tap_sound)

    def play_se(self, filename: str, force: bool = False):
        """Play Sound Effect (resources/assets/effects)"""
        if not pygame.mixer.get_init():
            return

        now = time.time()
        if not force and (now - self._last_se_time < self.cooldown):
            return

        path = self._resolve_audio_path(os.path.join("assets", "effects", filename))
        if path is None:
            return

        try:
            sound = self._sound_cache.get(path)
            if sound is None:
                sound = pygame.mixer.Sound(path)
                self._sound_cache[path] = sound
            channel = pygame.mixer.find_channel(True)
            channel.play(sound)
            self._last_se_time = now
        except Exception as e:
            print(f"Failed to play SE {filename}: {e}")

    def _resolve_audio_path(self, relative_base):
        for ext in [".wav", ".ogg", ".mp3"]:
            path = get_resource_path(relative_base + ext)
            if os.path.exists(path):
                return path
        return None

    def quit(self):
        if pygame.mixer.get_init():
            pygame.mixer.quit()
