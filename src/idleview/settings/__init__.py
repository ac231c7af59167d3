"""Settings document, persistence and the thread-safe settings store.

This package provides:
- SettingsDocument: the typed settings schema with total defaults
- SettingsStore: the locked in-memory owner mirrored to settings.json
- merge_json: the recursive merge used for partial updates
"""

from idleview.settings.document import (
    DisplaySettings,
    PhotosSettings,
    SettingsDocument,
    UnitsSettings,
)
from idleview.settings.merge import merge_json
from idleview.settings.paths import default_settings_path
from idleview.settings.storage import SettingsFile
from idleview.settings.store import SettingsStore

__all__ = [
    "DisplaySettings",
    "PhotosSettings",
    "SettingsDocument",
    "SettingsFile",
    "SettingsStore",
    "UnitsSettings",
    "default_settings_path",
    "merge_json",
]
