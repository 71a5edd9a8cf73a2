"""Settings service for application-wide configuration."""

import copy
import json
from typing import Any

import gi

gi.require_version("GObject", "2.0")

from gi.repository import GObject

from .config_path import get_config_dir
from .overview_builder import DEFAULT_BULLET, DEFAULT_TITLE


# Default settings
DEFAULT_SETTINGS = {
    "appearance": {
        "syntax_scheme": "Adwaita-dark",
    },
    "editor": {
        "font_family": "Monospace",
        "font_size": 12,
        "line_height": 1.4,
        "tab_size": 4,
        "insert_spaces": True,
        "word_wrap": True,
    },
    "overview": {
        "title": DEFAULT_TITLE,
        "bullet": DEFAULT_BULLET,
        "width": 320,
        "follow_cursor": True,
        "show_on_open": False,
    },
    "window": {
        "width": 1100,
        "height": 750,
        "maximized": False,
    },
}


class SettingsService(GObject.Object):
    """Singleton service for application settings.

    Usage:
        settings = SettingsService.get_instance()

        title = settings.get("overview.title")
        settings.set("overview.bullet", "+")  # saves and emits "changed"

        settings.connect("changed", on_setting_changed)
    """

    __gsignals__ = {
        # Emitted when any setting changes: callback(service, key, value)
        "changed": (GObject.SignalFlags.RUN_FIRST, None, (str, object)),
    }

    _instance: "SettingsService | None" = None

    def __init__(self, config_dir=None):
        super().__init__()
        self.config_dir = config_dir or get_config_dir()
        self.config_file = self.config_dir / "settings.json"
        self._settings: dict = {}
        self._load()

    @classmethod
    def get_instance(cls) -> "SettingsService":
        """Get the singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _load(self):
        """Load settings from disk, merging with defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    saved = json.load(f)
            except (json.JSONDecodeError, OSError):
                saved = {}
        else:
            saved = {}

        self._settings = self._deep_merge(DEFAULT_SETTINGS, saved)

    def _save(self):
        """Save settings to disk."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=2)
        except OSError as e:
            print(f"Failed to save settings: {e}")

    def _deep_merge(self, defaults: dict, overrides: dict) -> dict:
        """Deep merge overrides into a copy of defaults."""
        result = copy.deepcopy(defaults)
        for key, value in overrides.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting by dot-notation key like "overview.title"."""
        value = self._settings
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a setting by dot-notation key.

        Saves to disk and emits 'changed' when the value differs.
        """
        parts = key.split(".")
        target = self._settings
        for part in parts[:-1]:
            target = target.setdefault(part, {})

        if target.get(parts[-1]) != value:
            target[parts[-1]] = value
            self._save()
            self.emit("changed", key, value)

    def reset(self, key: str | None = None) -> None:
        """Reset one setting, or all settings when key is None."""
        if key is None:
            self._settings = copy.deepcopy(DEFAULT_SETTINGS)
            self._save()
            self.emit("changed", "*", None)
            return

        default_value = DEFAULT_SETTINGS
        for part in key.split("."):
            if isinstance(default_value, dict) and part in default_value:
                default_value = default_value[part]
            else:
                return  # Key not in defaults
        self.set(key, default_value)
