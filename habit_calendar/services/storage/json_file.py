"""
JSON File Storage Implementation

The slot key maps to `<data_dir>/<key>.json`. Writes go to a temporary
sibling file which then replaces the real one, so a crash mid-write
leaves the previous document intact.
"""

import os
from pathlib import Path
from typing import Optional

from habit_calendar.config import StorageSettings
from habit_calendar.services.storage.interface import (
    SlotReadError,
    SlotWriteError,
    StateSlotInterface,
)


class JsonFileSlot(StateSlotInterface):
    """A key-value slot backed by one JSON file on disk."""

    def __init__(self, path: Path, key: str):
        self._path = Path(path)
        self._key = key

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> "JsonFileSlot":
        return cls(settings.document_path, settings.storage_key)

    @property
    def key(self) -> str:
        return self._key

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Optional[str]:
        if not self._path.exists():
            return None
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SlotReadError(f"Could not read {self._path}: {e}")

    def write(self, document: str) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(document, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise SlotWriteError(f"Could not write {self._path}: {e}")
