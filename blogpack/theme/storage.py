"""Key-value persistence slots for the theme preference."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a persistence slot cannot be read or written."""


class PreferenceStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """In-process slot, the server-side stand-in for a browser's localStorage."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStorage:
    """Preferences kept as a flat JSON object in a single file.

    Structure: {"preferred-theme": "dark", ...}
    A missing file reads as an empty mapping. Unreadable or malformed files
    raise StorageError so callers can decide how to degrade.
    """

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageError(f"Cannot read preferences from {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Preferences file {self.path} is not a JSON object")
        return data

    def _save(self, data: dict[str, object]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(data, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning("Preferences not saved to %s: %s", self.path, e)
            raise StorageError(f"Cannot write preferences to {self.path}: {e}") from e

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def delete(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._save(data)
