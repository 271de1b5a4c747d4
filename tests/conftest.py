"""Common fixtures for testing the weather lookup application."""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
import yaml

from weather_lookup.models.config import AppConfig
from weather_lookup.models.weather import CurrentConditions, ForecastSample
from weather_lookup.utils.file_utils import JsonData, read_json
from weather_lookup.utils.storage import MemoryStorage


@pytest.fixture()
def test_data_dir() -> Path:
    """Directory holding test configuration and mock API responses."""
    return Path(__file__).parent / "data"


@pytest.fixture()
def test_config_path(test_data_dir: Path) -> Path:
    """Get the path to the test config file."""
    return test_data_dir / "test_config.yaml"


@pytest.fixture()
def test_config_data(test_config_path: Path) -> dict[str, Any]:
    """Load test configuration data from YAML."""
    with open(test_config_path) as f:
        return yaml.safe_load(f)


@pytest.fixture()
def app_config(test_config_data: dict[str, Any]) -> AppConfig:
    """Create a test application configuration."""
    return AppConfig.model_validate(test_config_data)


@pytest.fixture()
def memory_storage() -> MemoryStorage:
    """Empty in-memory storage backend."""
    return MemoryStorage()


@pytest.fixture()
def mock_current_response(test_data_dir: Path) -> JsonData:
    """Load a mock /weather response for Paris."""
    return read_json(test_data_dir / "mock_current_response.json")


@pytest.fixture()
def mock_forecast_response(test_data_dir: Path) -> JsonData:
    """Load a mock /forecast response."""
    return read_json(test_data_dir / "mock_forecast_response.json")


@pytest.fixture()
def paris_conditions() -> CurrentConditions:
    """Current conditions matching the mock Paris response."""
    return CurrentConditions(
        name="Paris",
        temp=20.4,
        feels_like=19.9,
        humidity=72,
        pressure=1012,
        wind_speed=3.6,
        visibility=10000,
        main="Rain",
        description="light rain",
        icon="10d",
        dt=1717243200,
        lat=48.8534,
        lon=2.3488,
    )


def _local_timestamp(year: int, month: int, day: int, hour: int = 0) -> int:
    return int(datetime(year, month, day, hour).timestamp())


@pytest.fixture()
def local_ts() -> Callable[..., int]:
    """Unix timestamp for a local wall-clock time, as (year, month, day, hour=0)."""
    return _local_timestamp


@pytest.fixture()
def make_samples() -> Callable[[int, int], list[ForecastSample]]:
    """Factory for 3-hourly samples spanning whole local days.

    The returned callable takes (days, samples_per_day) and starts at
    midnight on 2024-01-05 local time.
    """

    def _make(days: int, samples_per_day: int = 8) -> list[ForecastSample]:
        samples = []
        for day in range(days):
            for slot in range(samples_per_day):
                samples.append(
                    ForecastSample(
                        dt=_local_timestamp(2024, 1, 5 + day, slot * 3),
                        temp=float(day * 10 + slot),
                        main="Clear" if slot == 0 else "Clouds",
                        icon=f"0{slot % 4 + 1}d",
                    )
                )
        return samples

    return _make

