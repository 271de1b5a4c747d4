"""Command line entry point for the weather lookup client.

Provides the `weather-lookup` command with subcommands to search a city,
manage favorite cities and switch the color theme.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TextIO

from weather_lookup.cli.render import render_favorites, render_result, render_theme
from weather_lookup.constants import CONFIG_FILENAME
from weather_lookup.exceptions import ConfigurationError, StorageError
from weather_lookup.models.config import AppConfig
from weather_lookup.services.app_services import AppServices
from weather_lookup.utils.early_error_handler import (
    handle_configuration_error,
    handle_keyboard_interrupt,
)
from weather_lookup.utils.logging import setup_logging
from weather_lookup.utils.path_utils import path_resolver, validate_config_path

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def load_config(config_path: str | Path | None) -> AppConfig:
    """Load configuration for the CLI.

    An explicit path must exist. Without one, the standard locations are
    searched and defaults are used when no file is found, so favorites and
    theme commands work before an API key is set up.

    Args:
        config_path: Path given with --config, or None.

    Returns:
        Loaded or default configuration.

    Raises:
        ConfigFileNotFoundError: If an explicit path does not exist.
    """
    if config_path is not None:
        return AppConfig.from_yaml(validate_config_path(config_path))

    candidate = path_resolver.get_config_path(CONFIG_FILENAME)
    if candidate.exists():
        return AppConfig.from_yaml(candidate)
    return AppConfig()


class WeatherLookupCLI:
    """Runs CLI commands against the shared services.

    Attributes:
        services: Wired service objects
        out: Stream that command output is written to
    """

    def __init__(self, services: AppServices, out: TextIO | None = None) -> None:
        self.services = services
        self.out = out or sys.stdout

    @property
    def units(self) -> str:
        return self.services.config.weather.units

    def _print(self, text: str) -> None:
        self.out.write(text + "\n")

    async def search(self, city: str) -> int:
        """Search a city and print conditions and forecast."""
        result = await self.services.search.search(city)
        self._print(render_result(result, self.units))
        return EXIT_OK if result.ok else EXIT_ERROR

    def list_favorites(self) -> int:
        self._print(render_favorites(self.services.favorites.list_all(), self.units))
        return EXIT_OK

    def remove_favorite(self, city: str) -> int:
        removed = self.services.favorites.remove(city)
        if not removed:
            self._print(f'"{city}" is not in your favorites.')
            return EXIT_ERROR
        self._print(f'Removed "{city}" from favorites.')
        return EXIT_OK

    def clear_favorites(self, assume_yes: bool = False) -> int:
        """Clear all favorites after confirmation."""
        if not assume_yes:
            answer = input("Are you sure you want to clear all favorites? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                self._print("Favorites kept.")
                return EXIT_OK
        self.services.favorites.clear()
        self._print("Favorites cleared.")
        return EXIT_OK

    def show_theme(self) -> int:
        self._print(render_theme(self.services.theme.load()))
        return EXIT_OK

    def toggle_theme(self) -> int:
        self._print(render_theme(self.services.theme.toggle()))
        return EXIT_OK

    def run(self, args: argparse.Namespace) -> int:
        """Dispatch parsed arguments to a command.

        Args:
            args: Parsed command line arguments.

        Returns:
            Process exit code.
        """
        if args.command == "search":
            return asyncio.run(self.search(" ".join(args.city)))
        if args.command == "favorites":
            if args.action == "remove":
                return self.remove_favorite(" ".join(args.city))
            if args.action == "clear":
                return self.clear_favorites(assume_yes=args.yes)
            return self.list_favorites()
        if args.command == "theme":
            if args.action == "toggle":
                return self.toggle_theme()
            return self.show_theme()
        raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the weather-lookup command."""
    parser = argparse.ArgumentParser(
        prog="weather-lookup", description="Look up current weather and a 5-day forecast"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to configuration file (default: search for {CONFIG_FILENAME})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search_parser = subparsers.add_parser("search", help="Show weather for a city")
    search_parser.add_argument("city", nargs="+", help="City name, e.g. London or Paris,FR")

    favorites_parser = subparsers.add_parser("favorites", help="Manage favorite cities")
    favorites_actions = favorites_parser.add_subparsers(dest="action")
    favorites_actions.add_parser("list", help="List favorite cities")
    remove_parser = favorites_actions.add_parser("remove", help="Remove a favorite city")
    remove_parser.add_argument("city", nargs="+", help="City name in any casing")
    clear_parser = favorites_actions.add_parser("clear", help="Remove all favorite cities")
    clear_parser.add_argument("--yes", "-y", action="store_true", help="Do not ask to confirm")

    theme_parser = subparsers.add_parser("theme", help="Show or toggle the color theme")
    theme_actions = theme_parser.add_subparsers(dest="action")
    theme_actions.add_parser("show", help="Show the current theme")
    theme_actions.add_parser("toggle", help="Switch between light and dark")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the weather-lookup command.

    Parses command line arguments, loads configuration, sets up logging on
    stderr and runs the requested command.

    Args:
        argv: Arguments to parse, defaults to sys.argv.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        handle_configuration_error(e)
        return EXIT_CONFIG_ERROR

    setup_logging(config.logging, "weather_lookup.cli", stream=sys.stderr)

    cli = WeatherLookupCLI(AppServices.from_config(config))
    try:
        return cli.run(args)
    except StorageError as e:
        sys.stderr.write(f"{e}\n")
        return EXIT_ERROR
    except KeyboardInterrupt:
        handle_keyboard_interrupt()
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
