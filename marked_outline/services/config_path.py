"""Configuration path utilities."""

import os
from pathlib import Path

APP_DIR_NAME = "marked-outline"


def get_config_dir() -> Path:
    """Get the configuration directory.

    Uses $XDG_CONFIG_HOME/marked-outline when XDG_CONFIG_HOME is set,
    otherwise ~/.config/marked-outline.
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME
