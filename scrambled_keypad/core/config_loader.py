"""
Settings file access.

keypad_config.yml has three sections: ``keypad`` (layout/scramble tunables),
``audio`` (tap feedback) and ``ui`` (demo window). Each is exposed as a
plain dict; a missing or malformed section reads as empty so the defaults in
KeypadConfig and the callers apply.
"""
import yaml
import os
from typing import Any, Dict
from scrambled_keypad.paths import get_resource_path

CONFIG_FILE = "config/keypad_config.yml"
SECTIONS = ("keypad", "audio", "ui")


class ConfigLoader:
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self):
        config_path = get_resource_path(CONFIG_FILE)
        if not os.path.exists(config_path):
            print(f"Keypad settings not found, using defaults: {config_path}")
            self._config = {}
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Failed to read keypad settings ({config_path}): {e}")
            data = None

        self._config = self._normalize(data)

    @staticmethod
    def _normalize(data):
        """Keep only mapping-valued sections; anything else reads as empty."""
        if not isinstance(data, dict):
            return {}
        normalized = dict(data)
        for name in SECTIONS:
            value = data.get(name)
            if value is not None and not isinstance(value, dict):
                print(f"Ignoring '{name}' settings: expected a mapping, got {type(value).__name__}")
                value = None
            normalized[name] = value or {}
        return normalized

    def reload(self):
        """Re-read the settings file (the singleton otherwise loads once)."""
        self._load_config()

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    def section(self, name: str) -> Dict[str, Any]:
        return self._config.get(name) or {}

    @property
    def keypad(self) -> Dict[str, Any]:
        """Layout and scramble tunables, fed to KeypadConfig.from_dict"""
        return self.section("keypad")

    @property
    def audio(self) -> Dict[str, Any]:
        return self.section("audio")

    @property
    def ui(self) -> Dict[str, Any]:
        return self.section("ui")

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)
