"""Configuration specific to server tests."""

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from weather_lookup.models.weather import CurrentConditions
from weather_lookup.server.main import WeatherLookupServer
from weather_lookup.utils.storage import MemoryStorage


@pytest.fixture(autouse=True)
def _suppress_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Suppress all logging output in tests."""
    monkeypatch.setattr("structlog.configure", lambda *args, **kwargs: None)

    class SilentStreamHandler(logging.Handler):
        def __init__(self, stream=None) -> None:
            super().__init__()

        def emit(self, record) -> None:
            pass

    monkeypatch.setattr("logging.StreamHandler", SilentStreamHandler)


@pytest.fixture()
def server(
    test_config_path: Path, paris_conditions: CurrentConditions
) -> Generator[WeatherLookupServer, None, None]:
    """Server over in-memory storage with API calls mocked to return Paris."""
    server = WeatherLookupServer(test_config_path, storage=MemoryStorage())
    server.services.api_client.fetch_current = AsyncMock(return_value=paris_conditions)
    server.services.api_client.fetch_forecast = AsyncMock(return_value=[])
    yield server
    for name in ("weather_lookup", "weather_lookup.server"):
        logging.getLogger(name).handlers = []


@pytest.fixture()
def client(server: WeatherLookupServer) -> TestClient:
    """Test client for the server application."""
    return TestClient(server.app)
