"""Error reporting for failures that happen before logging is configured.

The CLI and server load configuration before logging exists, so problems
such as a missing config file or an unusable log file are written straight
to stderr here.
"""

import sys
from datetime import datetime
from typing import Any, TextIO

from weather_lookup.exceptions import ConfigurationError


def handle_startup_error(
    error_type: str,
    message: str,
    details: dict[str, Any] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write a timestamped startup error and its details to stderr.

    Args:
        error_type: Short error category (e.g., "CONFIG_ERROR")
        message: Main error message
        details: Optional dictionary of additional error details
        stream: Output stream, defaults to sys.stderr
    """
    out = stream or sys.stderr
    timestamp = datetime.now().isoformat()

    out.write(f"\n[{timestamp}] {error_type}: {message}\n")

    if details:
        out.write("Details:\n")
        for key, value in details.items():
            out.write(f"  {key}: {value}\n")

    out.flush()


def handle_configuration_error(error: ConfigurationError, stream: TextIO | None = None) -> None:
    """Report a configuration problem with a hint about the config file.

    Args:
        error: The configuration error raised during startup
        stream: Output stream, defaults to sys.stderr
    """
    handle_startup_error("CONFIG_ERROR", error.message, error.details, stream)
    (stream or sys.stderr).write(
        "Create a config.yaml with a 'weather.api_key' entry or pass --config PATH.\n"
    )


def handle_keyboard_interrupt(stream: TextIO | None = None) -> None:
    """Handle keyboard interrupt gracefully."""
    out = stream or sys.stderr
    out.write("\n\nInterrupted by user (Ctrl+C)\n")
    out.flush()
