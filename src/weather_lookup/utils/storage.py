"""Key-value storage backends for persisted preferences.

Favorites and the theme are kept as string values under named keys, the
same shape as browser local storage. Stores receive a backend instead of
touching files directly, so tests can inject MemoryStorage.
"""

import logging
from pathlib import Path
from typing import Protocol

from weather_lookup.exceptions import StorageError, chain_exception
from weather_lookup.utils import file_utils

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Minimal string key-value storage capability."""

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete key if present."""
        ...


class MemoryStorage:
    """In-process storage; contents are lost when the object is discarded."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """Storage backed by a single JSON object file.

    Every operation reads the whole file and every mutation rewrites it
    atomically. There is no locking; one process is expected to own the file.

    Attributes:
        path: Location of the JSON file
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the storage.

        Args:
            path: Location of the JSON file. It is created on first write.
        """
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        """Read the full key-value mapping from disk.

        Returns:
            Stored mapping, empty when the file does not exist yet.

        Raises:
            StorageError: If the file is unreadable or not a JSON object of strings.
        """
        if not file_utils.file_exists(self.path):
            return {}

        try:
            data = file_utils.read_json(self.path)
        except (OSError, ValueError) as e:
            raise chain_exception(
                StorageError(
                    "Failed to read preference storage",
                    {"path": str(self.path), "error": str(e)},
                ),
                e,
            ) from e

        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise StorageError(
                "Preference storage has an unexpected format",
                {"path": str(self.path), "type": type(data).__name__},
            )
        return data

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def _save(self, data: dict[str, str]) -> None:
        """Rewrite the whole mapping to disk.

        Raises:
            StorageError: If the file or its directory cannot be written.
        """
        try:
            file_utils.write_json(self.path, data)
        except OSError as e:
            raise chain_exception(
                StorageError(
                    "Failed to write preference storage",
                    {"path": str(self.path), "error": str(e)},
                ),
                e,
            ) from e

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)
        logger.debug(f"Stored key '{key}' in {self.path}")

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)
            logger.debug(f"Removed key '{key}' from {self.path}")
