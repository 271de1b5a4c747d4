"""Persisted list of favorite cities."""

import json
import logging

from pydantic import TypeAdapter, ValidationError

from weather_lookup.constants import FAVORITES_STORAGE_KEY
from weather_lookup.exceptions import StorageError, chain_exception
from weather_lookup.models.preferences import FavoriteEntry
from weather_lookup.utils.formatting import round_half_up
from weather_lookup.utils.storage import KeyValueStorage

_entries_adapter = TypeAdapter(list[FavoriteEntry])


def _normalize(city_name: str) -> str:
    return city_name.lower()


class FavoritesStore:
    """Ordered, de-duplicated favorite cities kept in key-value storage.

    City identity is case-insensitive. Every mutation reads the whole list,
    changes it and writes the whole list back.

    Attributes:
        storage: Storage backend holding the JSON-encoded list
        key: Storage key for the list
    """

    def __init__(self, storage: KeyValueStorage, key: str = FAVORITES_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self.logger = logging.getLogger(__name__)

    def _read(self) -> list[FavoriteEntry]:
        """Load the stored list.

        Returns:
            Stored entries, empty when nothing has been saved.

        Raises:
            StorageError: If the stored value is not a valid favorites list.
        """
        raw = self.storage.get(self.key)
        if raw is None:
            return []
        try:
            return _entries_adapter.validate_json(raw)
        except ValidationError as e:
            raise chain_exception(
                StorageError("Stored favorites are not valid", {"key": self.key}),
                e,
            ) from e

    def _write(self, entries: list[FavoriteEntry]) -> None:
        payload = [entry.model_dump() for entry in entries]
        self.storage.set(self.key, json.dumps(payload, ensure_ascii=False))

    def list_all(self) -> list[FavoriteEntry]:
        """Return all favorites in insertion order."""
        return self._read()

    def contains(self, city_name: str) -> bool:
        """Check whether a city is saved, ignoring case."""
        normalized = _normalize(city_name)
        return any(_normalize(entry.name) == normalized for entry in self._read())

    def add(self, city_name: str, temperature: float) -> bool:
        """Save a city unless one with the same name already exists.

        The first saved spelling and temperature win; later adds of the same
        city in any casing are ignored.

        Args:
            city_name: City name, stored as given.
            temperature: Current temperature, stored rounded to an integer.

        Returns:
            True if the city was added, False if it was already saved.
        """
        entries = self._read()
        normalized = _normalize(city_name)
        if any(_normalize(entry.name) == normalized for entry in entries):
            return False

        entries.append(FavoriteEntry(name=city_name, temp=round_half_up(temperature)))
        self._write(entries)
        self.logger.info(f"Added '{city_name}' to favorites")
        return True

    def remove(self, city_name: str) -> int:
        """Remove every favorite whose name matches, ignoring case.

        Args:
            city_name: City name in any casing.

        Returns:
            Number of entries removed.
        """
        entries = self._read()
        normalized = _normalize(city_name)
        kept = [entry for entry in entries if _normalize(entry.name) != normalized]
        self._write(kept)

        removed = len(entries) - len(kept)
        if removed:
            self.logger.info(f"Removed '{city_name}' from favorites")
        return removed

    def clear(self) -> None:
        """Delete all favorites."""
        self.storage.remove(self.key)
        self.logger.info("Cleared favorites")
