"""Wiring of the service objects shared by the CLI and the server."""

from dataclasses import dataclass

from weather_lookup.models.config import AppConfig
from weather_lookup.services.api import WeatherAPIClient
from weather_lookup.services.favorites import FavoritesStore
from weather_lookup.services.search import WeatherSearch
from weather_lookup.services.theme import ThemePreference
from weather_lookup.utils.path_utils import path_resolver
from weather_lookup.utils.storage import JsonFileStorage, KeyValueStorage


@dataclass
class AppServices:
    """Service objects built from one configuration and one storage backend."""

    config: AppConfig
    storage: KeyValueStorage
    api_client: WeatherAPIClient
    favorites: FavoritesStore
    theme: ThemePreference
    search: WeatherSearch

    @classmethod
    def from_config(
        cls, config: AppConfig, storage: KeyValueStorage | None = None
    ) -> "AppServices":
        """Build services, using JSON file storage unless a backend is given.

        Args:
            config: Application configuration.
            storage: Optional storage backend, e.g. MemoryStorage in tests.

        Returns:
            Wired AppServices instance.
        """
        if storage is None:
            storage = JsonFileStorage(path_resolver.get_storage_file(config.storage.path))

        api_client = WeatherAPIClient(config.weather)
        favorites = FavoritesStore(storage)
        return cls(
            config=config,
            storage=storage,
            api_client=api_client,
            favorites=favorites,
            theme=ThemePreference(storage),
            search=WeatherSearch(api_client, favorites),
        )
