"""Durable JSON file backing the settings store."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Final

from pydantic import ValidationError as PydanticValidationError

from idleview.errors import PersistenceError, StorageError
from idleview.settings.document import SettingsDocument

logger: Final = logging.getLogger(__name__)


class SettingsFile:
    """Reads and writes a single pretty-printed settings.json."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def read(self) -> SettingsDocument | None:
        """Load the document from disk.

        Returns:
            The stored document, or None if there is no file at the path

        Raises:
            StorageError: If the file exists but cannot be read or parsed
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError):
            return None
        except OSError as exc:
            raise StorageError(f"Failed to read settings file: {exc}", exc) from exc

        try:
            return SettingsDocument.model_validate_json(content)
        except PydanticValidationError as exc:
            raise StorageError(f"Failed to parse settings JSON: {exc}", exc) from exc

    def write(self, document: SettingsDocument) -> None:
        """Atomically replace the file with ``document``.

        The JSON is written to a temporary file next to the target and
        renamed over it.

        Raises:
            PersistenceError: If the directory or file cannot be written
        """
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(
                f"Failed to create settings directory: {exc}", exc
            ) from exc

        payload = json.dumps(document.to_json_tree(), indent=2)
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise PersistenceError(f"Failed to write settings file: {exc}", exc) from exc

        logger.debug("Settings written to %s", self.path)
