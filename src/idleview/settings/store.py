"""Thread-safe owner of the settings document."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError as PydanticValidationError

from idleview.errors import ValidationError
from idleview.settings.document import SettingsDocument
from idleview.settings.merge import merge_json
from idleview.settings.storage import SettingsFile

logger: Final = logging.getLogger(__name__)


class SettingsStore:
    """Single source of truth for the settings document.

    The in-memory document is guarded by one lock. Every mutation swaps
    the document and takes a generation number while holding it; the file
    is then written under a separate lock, and a write that has already
    been overtaken by a newer generation is skipped. The last mutation to
    acquire the document lock therefore always decides the file contents,
    and readers are never blocked by disk I/O.

    Examples:
        store = SettingsStore(default_settings_path())
        store.initialize()
        store.merge_patch({"units": {"temperature_unit": "fahrenheit"}})
    """

    def __init__(self, path: Path | SettingsFile) -> None:
        self._file = path if isinstance(path, SettingsFile) else SettingsFile(path)
        self._document = SettingsDocument.default()
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._generation = 0
        self._persisted_generation = 0

    @property
    def path(self) -> Path:
        """Path of the backing settings file."""
        return self._file.path

    def initialize(self) -> SettingsDocument:
        """Load the document from disk, keeping defaults if there is no file.

        Nothing is written when the file is missing.

        Raises:
            StorageError: If the file exists but cannot be read or parsed
        """
        stored = self._file.read()
        with self._lock:
            if stored is None:
                logger.info("No settings file at %s, using defaults", self.path)
                self._document = SettingsDocument.default()
            else:
                logger.info("Loaded settings from %s", self.path)
                self._document = stored
            return self._document.model_copy(deep=True)

    def get(self) -> SettingsDocument:
        """Return a snapshot copy of the current document."""
        with self._lock:
            return self._document.model_copy(deep=True)

    def replace(self, document: SettingsDocument) -> SettingsDocument:
        """Replace the whole document and persist it.

        Raises:
            PersistenceError: If the file could not be written. The new
                document stays in effect in memory.
        """
        snapshot = document.model_copy(deep=True)
        with self._lock:
            self._document = snapshot
            generation = self._next_generation()
        self._persist(snapshot, generation)
        return snapshot.model_copy(deep=True)

    def merge_patch(self, patch: Any) -> SettingsDocument:
        """Merge a partial JSON document onto the current settings.

        Args:
            patch: Parsed JSON; nested objects are merged key by key,
                any other value replaces the current one

        Returns:
            The merged document

        Raises:
            ValidationError: If the merged result is not a valid document;
                the store is left unchanged
            PersistenceError: If the file could not be written
        """
        with self._lock:
            merged = merge_json(self._document.to_json_tree(), patch)
            try:
                updated = SettingsDocument.model_validate(merged)
            except PydanticValidationError as exc:
                raise ValidationError.from_pydantic(
                    exc, "Failed to parse updated settings"
                ) from exc
            self._document = updated
            generation = self._next_generation()
        self._persist(updated, generation)
        return updated.model_copy(deep=True)

    def reset(self) -> SettingsDocument:
        """Restore and persist the built-in defaults."""
        return self.replace(SettingsDocument.default())

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _persist(self, document: SettingsDocument, generation: int) -> None:
        # A failed write still claims its generation, so an older document
        # can never land on disk after a newer one was attempted.
        with self._write_lock:
            if generation < self._persisted_generation:
                logger.debug(
                    "Skipping settings write %d, already superseded by %d",
                    generation,
                    self._persisted_generation,
                )
                return
            try:
                self._file.write(document)
            finally:
                self._persisted_generation = generation
