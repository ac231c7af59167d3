"""Location of the settings file on each platform."""

from __future__ import annotations

import os
import platform
from pathlib import Path

from idleview.errors import StorageError

APP_DIR_NAME = "idleview"
SETTINGS_FILE_NAME = "settings.json"
SETTINGS_PATH_ENV = "IDLEVIEW_SETTINGS"


def default_settings_path(system: str | None = None) -> Path:
    """Return the per-user settings file path.

    ``IDLEVIEW_SETTINGS`` overrides the platform default.

    Args:
        system: Platform name as returned by ``platform.system()``
            (detected when omitted)

    Returns:
        Path to settings.json

    Raises:
        StorageError: If the platform base directory cannot be determined
    """
    override = os.environ.get(SETTINGS_PATH_ENV)
    if override:
        return Path(override).expanduser()

    system = system or platform.system()
    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise StorageError("Failed to get APPDATA directory")
        base = Path(appdata)
    elif system == "Darwin":
        base = Path.home() / "Library" / "Application Support"
    elif system == "Linux":
        xdg = os.environ.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"
    else:
        raise StorageError(f"Unsupported platform: {system}")

    return base / APP_DIR_NAME / SETTINGS_FILE_NAME
