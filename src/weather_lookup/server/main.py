# pyright: reportUnknownMemberType=false

"""JSON server for the weather lookup client.

Implements a FastAPI application that exposes city search, favorites and
theme preference over HTTP, using the same services as the CLI.
"""

import argparse
import logging
import sys
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TypeVar

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from weather_lookup.constants import CONFIG_FILENAME
from weather_lookup.exceptions import ConfigurationError, StorageError
from weather_lookup.models.config import AppConfig
from weather_lookup.models.preferences import FavoriteEntry, SearchResult, Theme
from weather_lookup.services.app_services import AppServices
from weather_lookup.utils.early_error_handler import handle_configuration_error
from weather_lookup.utils.logging import setup_logging
from weather_lookup.utils.path_utils import validate_config_path
from weather_lookup.utils.storage import KeyValueStorage

# HTTP status returned for each kind of search error
ERROR_STATUS_CODES = {
    "InvalidCityNameError": 400,
    "CityNotFoundError": 404,
    "MissingConfigError": 503,
    "APIAuthenticationError": 502,
    "UpstreamError": 502,
    "InvalidAPIResponseError": 502,
    "TransportError": 504,
}
DEFAULT_ERROR_STATUS = 500

T = TypeVar("T")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log application startup and shutdown.

    Args:
        app: FastAPI application instance

    Yields:
        None
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting Weather Lookup Server")
    yield
    logger.info("Shutting down Weather Lookup Server")


class ThemeResponse(BaseModel):
    """Current theme and the icon offered for switching it."""

    theme: Theme
    toggle_icon: str


class RemovedResponse(BaseModel):
    """Number of favorites removed by a delete request."""

    removed: int


class WeatherLookupServer:
    """Main server application for weather lookup.

    Attributes:
        config: Application configuration from YAML
        logger: Configured logger instance
        app: FastAPI application instance
        services: Search, favorites and theme services
    """

    def __init__(
        self,
        config_path: Path,
        storage: KeyValueStorage | None = None,
        app_factory: Callable[[], FastAPI] = lambda: FastAPI(
            title="Weather Lookup Server", lifespan=lifespan
        ),
    ) -> None:
        """Initialize the server.

        Args:
            config_path: Path to configuration file.
            storage: Optional storage backend; defaults to the JSON file from config.
            app_factory: Optional factory function to create FastAPI app.

        Raises:
            ConfigFileNotFoundError: If configuration file doesn't exist.
            InvalidConfigError: If configuration cannot be parsed or is invalid.
        """
        self.config = AppConfig.from_yaml(config_path)
        self.logger = setup_logging(self.config.logging, "weather_lookup.server")
        self.app = app_factory()
        self.services = AppServices.from_config(self.config, storage)

        self._setup_routes()

        self.logger.info("Weather Lookup Server initialized")

    def _setup_routes(self) -> None:
        """Set up FastAPI routes.

        Registers route handlers for the API endpoints:
        - GET /: Server health check
        - GET /weather: Search a city
        - GET /weather/latest: Most recent search result
        - GET, DELETE /favorites: List or clear favorites
        - DELETE /favorites/{city}: Remove one favorite
        - GET /theme, POST /theme/toggle: Theme preference
        """

        @self.app.get("/")
        async def root() -> dict[str, str]:
            """Root endpoint for health check."""
            return {"status": "ok", "service": "Weather Lookup Server"}

        @self.app.get("/weather")
        async def get_weather(city: str = Query("")) -> JSONResponse:
            """Search current conditions and forecast for a city.

            Search errors are returned in the body's `error` field with a
            status code matching the error kind.
            """
            result = await self.services.search.search(city)
            return self._result_response(result)

        @self.app.get("/weather/latest")
        async def get_latest_weather() -> JSONResponse:
            """Return the result of the most recent search."""
            if self.services.search.latest is None:
                raise HTTPException(status_code=404, detail="No search has been made yet")
            return self._result_response(self.services.search.latest)

        @self.app.get("/favorites")
        async def list_favorites() -> list[FavoriteEntry]:
            """List favorite cities in the order they were saved."""
            return self._call_storage(self.services.favorites.list_all)

        @self.app.delete("/favorites")
        async def clear_favorites() -> dict[str, str]:
            """Remove all favorite cities."""
            self._call_storage(self.services.favorites.clear)
            return {"status": "cleared"}

        @self.app.delete("/favorites/{city}")
        async def remove_favorite(city: str) -> RemovedResponse:
            """Remove a favorite city, ignoring case."""
            removed = self._call_storage(lambda: self.services.favorites.remove(city))
            if not removed:
                raise HTTPException(status_code=404, detail=f'"{city}" is not a favorite')
            return RemovedResponse(removed=removed)

        @self.app.get("/theme")
        async def get_theme() -> ThemeResponse:
            """Return the stored theme."""
            theme = self._call_storage(self.services.theme.load)
            return ThemeResponse(theme=theme, toggle_icon=theme.toggle_icon)

        @self.app.post("/theme/toggle")
        async def toggle_theme() -> ThemeResponse:
            """Switch between light and dark."""
            theme = self._call_storage(self.services.theme.toggle)
            return ThemeResponse(theme=theme, toggle_icon=theme.toggle_icon)

    @staticmethod
    def _result_response(result: SearchResult) -> JSONResponse:
        """Serialize a search result with a status code for its error kind."""
        status_code = 200
        if result.error is not None:
            status_code = ERROR_STATUS_CODES.get(result.error.kind, DEFAULT_ERROR_STATUS)
        return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))

    def _call_storage(self, operation: Callable[[], T]) -> T:
        """Run a storage operation, mapping storage failures to HTTP 500."""
        try:
            return operation()
        except StorageError as e:
            self.logger.error(f"Storage error: {e}")
            raise HTTPException(status_code=500, detail=e.message) from e

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Run the server.

        Starts the Uvicorn ASGI server with the configured FastAPI application.

        Args:
            host: Host to bind to. Defaults to server config or 127.0.0.1 (localhost).
            port: Port to bind to. Defaults to server config or 8000.
        """
        import uvicorn

        bind_host = host or self.config.server.host
        bind_port = port or self.config.server.port

        self.logger.info(f"Starting Weather Lookup Server on {bind_host}:{bind_port}")

        uvicorn.run(self.app, host=bind_host, port=bind_port)


def main() -> None:
    """Main entry point for the server.

    Parses command line arguments, initializes the server with the
    specified configuration, and starts it running.
    """
    parser = argparse.ArgumentParser(description="Weather Lookup Server")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to configuration file (default: search for {CONFIG_FILENAME})",
    )
    parser.add_argument(
        "--host", type=str, help="Host to bind to (default: 127.0.0.1 or config value)"
    )
    parser.add_argument("--port", type=int, help="Port to bind to (default: 8000 or config value)")
    args = parser.parse_args()

    try:
        config_path = validate_config_path(args.config)
        server = WeatherLookupServer(config_path)
    except ConfigurationError as e:
        handle_configuration_error(e)
        sys.exit(2)

    server.run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
