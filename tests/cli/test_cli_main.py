"""Tests for the weather-lookup command line interface."""

import json
import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import yaml

from weather_lookup.cli.main import EXIT_CONFIG_ERROR, EXIT_ERROR, EXIT_OK, load_config, main
from weather_lookup.exceptions import CityNotFoundError, ConfigFileNotFoundError
from weather_lookup.models.config import AppConfig
from weather_lookup.models.weather import CurrentConditions
from weather_lookup.services.api import WeatherAPIClient


@pytest.fixture(autouse=True)
def _reset_loggers() -> Generator[None, None, None]:
    """Detach handlers bound to captured streams after each test."""
    yield
    for name in ("weather_lookup", "weather_lookup.cli"):
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.propagate = True


@pytest.fixture()
def storage_path(tmp_path: Path) -> Path:
    return tmp_path / "storage.json"


@pytest.fixture()
def cli_config(tmp_path: Path, storage_path: Path) -> Path:
    """Config file with a test API key and storage under tmp_path."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        yaml.safe_dump(
            {
                "weather": {"api_key": "test_api_key_12345", "units": "metric"},
                "storage": {"path": str(storage_path)},
                "logging": {"level": "WARNING", "format": "text"},
            }
        )
    )
    return config_file


@pytest.fixture()
def mock_fetch(paris_conditions: CurrentConditions) -> Generator[AsyncMock, None, None]:
    """Mock both API calls; current conditions return Paris."""
    with (
        patch.object(
            WeatherAPIClient, "fetch_current", new=AsyncMock(return_value=paris_conditions)
        ) as mock_current,
        patch.object(WeatherAPIClient, "fetch_forecast", new=AsyncMock(return_value=[])),
    ):
        yield mock_current


def run_cli(config: Path, *args: str) -> int:
    return main(["--config", str(config), *args])


class TestLoadConfig:
    """Test configuration loading for the CLI."""

    def test_explicit_path(self, test_config_path: Path) -> None:
        assert load_config(test_config_path).weather.api_key == "test_api_key_12345"

    def test_explicit_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        """Test defaults are used when no config file is found."""
        with patch(
            "weather_lookup.cli.main.path_resolver.get_config_path",
            return_value=tmp_path / "config.yaml",
        ):
            assert load_config(None) == AppConfig()


class TestSearchCommand:
    """Test the search subcommand."""

    def test_search_prints_conditions(
        self,
        cli_config: Path,
        mock_fetch: AsyncMock,
        storage_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test a successful search prints conditions and saves the city."""
        exit_code = run_cli(cli_config, "search", "Paris")

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert "Paris" in out
        assert "20°C  Light rain" in out
        assert "Visibility: 10.0 km" in out
        assert "https://openweathermap.org/img/wn/10d@4x.png" in out
        stored = json.loads(storage_path.read_text())
        assert json.loads(stored["favorites"]) == [{"name": "Paris", "temp": 20}]

    def test_search_joins_words(self, cli_config: Path, mock_fetch: AsyncMock) -> None:
        """Test multi-word city names are passed as one name."""
        run_cli(cli_config, "search", "New", "York")

        mock_fetch.assert_awaited_once_with("New York")

    def test_search_not_found(
        self, cli_config: Path, mock_fetch: AsyncMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        mock_fetch.side_effect = CityNotFoundError("Zzzqx")

        exit_code = run_cli(cli_config, "search", "Zzzqx")

        assert exit_code == EXIT_ERROR
        assert 'City "Zzzqx" not found. Please check the spelling.' in capsys.readouterr().out

    def test_search_blank(
        self, cli_config: Path, mock_fetch: AsyncMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = run_cli(cli_config, "search", "  ")

        assert exit_code == EXIT_ERROR
        assert "Please enter a city name" in capsys.readouterr().out
        mock_fetch.assert_not_called()

    def test_search_unwritable_storage(
        self,
        cli_config: Path,
        mock_fetch: AsyncMock,
        storage_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test the search still succeeds when the favorite cannot be saved."""
        storage_path.mkdir()

        exit_code = run_cli(cli_config, "search", "Paris")

        captured = capsys.readouterr()
        assert exit_code == EXIT_OK
        assert "20°C  Light rain" in captured.out
        assert "Could not save 'Paris' to favorites" in captured.err

    def test_search_without_api_key(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the placeholder key is reported without a request."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.safe_dump(
                {"storage": {"path": str(tmp_path / "s.json")}, "logging": {"level": "ERROR"}}
            )
        )

        exit_code = run_cli(config_file, "search", "Paris")

        assert exit_code == EXIT_ERROR
        assert "API key not configured" in capsys.readouterr().out


class TestFavoritesCommand:
    """Test the favorites subcommand."""

    def test_list_empty(self, cli_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli(cli_config, "favorites") == EXIT_OK
        assert "No favorite cities saved." in capsys.readouterr().out

    def test_list_after_search(
        self, cli_config: Path, mock_fetch: AsyncMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run_cli(cli_config, "search", "Paris")
        capsys.readouterr()

        assert run_cli(cli_config, "favorites", "list") == EXIT_OK
        assert capsys.readouterr().out.strip() == "Paris: 20°C"

    def test_remove(
        self, cli_config: Path, mock_fetch: AsyncMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run_cli(cli_config, "search", "Paris")

        assert run_cli(cli_config, "favorites", "remove", "PARIS") == EXIT_OK
        assert 'Removed "PARIS" from favorites.' in capsys.readouterr().out

    def test_remove_missing(self, cli_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli(cli_config, "favorites", "remove", "Oslo") == EXIT_ERROR
        assert '"Oslo" is not in your favorites.' in capsys.readouterr().out

    def test_clear_confirmed(
        self, cli_config: Path, mock_fetch: AsyncMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run_cli(cli_config, "search", "Paris")

        with patch("builtins.input", return_value="y"):
            assert run_cli(cli_config, "favorites", "clear") == EXIT_OK

        assert "Favorites cleared." in capsys.readouterr().out
        run_cli(cli_config, "favorites")
        assert "No favorite cities saved." in capsys.readouterr().out

    def test_clear_declined(
        self, cli_config: Path, mock_fetch: AsyncMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        run_cli(cli_config, "search", "Paris")

        with patch("builtins.input", return_value="n"):
            run_cli(cli_config, "favorites", "clear")

        assert "Favorites kept." in capsys.readouterr().out
        run_cli(cli_config, "favorites")
        assert "Paris: 20°C" in capsys.readouterr().out

    def test_clear_yes_flag_skips_prompt(
        self, cli_config: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("builtins.input") as mock_input:
            assert run_cli(cli_config, "favorites", "clear", "--yes") == EXIT_OK

        mock_input.assert_not_called()

    def test_corrupt_storage(
        self, cli_config: Path, storage_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a broken storage file is reported on stderr."""
        storage_path.write_text("{oops")

        assert run_cli(cli_config, "favorites") == EXIT_ERROR
        assert "Failed to read preference storage" in capsys.readouterr().err


class TestThemeCommand:
    """Test the theme subcommand."""

    def test_show_default(self, cli_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run_cli(cli_config, "theme") == EXIT_OK
        assert capsys.readouterr().out.strip() == "Theme: light (toggle: 🌙)"

    def test_toggle_persists(self, cli_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
        run_cli(cli_config, "theme", "toggle")
        capsys.readouterr()

        run_cli(cli_config, "theme", "show")

        assert capsys.readouterr().out.strip() == "Theme: dark (toggle: ☀️)"


class TestMain:
    """Test argument handling in main."""

    def test_missing_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["--config", str(tmp_path / "missing.yaml"), "theme"])

        assert exit_code == EXIT_CONFIG_ERROR
        assert "CONFIG_ERROR" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "content",
        ["weather:\n  units: kelvin\n", "weather: [unclosed\n"],
        ids=["bad-units", "bad-syntax"],
    )
    def test_invalid_config(
        self, tmp_path: Path, content: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test an unusable config file exits with the config error code."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)

        exit_code = main(["--config", str(config_file), "theme"])

        err = capsys.readouterr().err
        assert exit_code == EXIT_CONFIG_ERROR
        assert "CONFIG_ERROR" in err
        assert "Invalid configuration file" in err

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])

    def test_keyboard_interrupt(
        self, cli_config: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("weather_lookup.cli.main.WeatherLookupCLI.run", side_effect=KeyboardInterrupt):
            assert run_cli(cli_config, "theme") == EXIT_ERROR

        assert "Interrupted by user" in capsys.readouterr().err
