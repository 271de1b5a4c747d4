"""Display formatting helpers shared by the CLI and the server.

Converts raw API values into the strings shown to users: icon asset URLs,
rounded temperatures with unit symbols, wind speed and visibility.
"""

import math

from weather_lookup.constants import (
    DEFAULT_UNITS,
    METERS_PER_KILOMETER,
    OWM_ICON_URL,
    TEMPERATURE_SYMBOLS,
    WIND_SPEED_UNITS,
)


def icon_url(code: str, size: str) -> str:
    """Build the OpenWeatherMap icon asset URL for an icon code.

    Args:
        code: OpenWeatherMap icon code (e.g., "01d").
        size: Asset size suffix, "4x" or "2x".

    Returns:
        Icon URL, e.g. "https://openweathermap.org/img/wn/01d@4x.png".
    """
    return OWM_ICON_URL.format(code=code, size=size)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded towards positive infinity.

    Python's round() uses banker's rounding, which would store 20 for 20.5.

    Args:
        value: Number to round.

    Returns:
        The rounded integer.
    """
    return math.floor(value + 0.5)


def format_temperature(value: float, units: str = DEFAULT_UNITS) -> str:
    """Format a temperature rounded to a whole degree.

    Args:
        value: Temperature in the configured unit system.
        units: Unit system ("metric", "imperial" or "standard").

    Returns:
        Formatted temperature, e.g. "21°C".
    """
    symbol = TEMPERATURE_SYMBOLS.get(units, TEMPERATURE_SYMBOLS[DEFAULT_UNITS])
    return f"{round_half_up(value)}{symbol}"


def format_wind_speed(speed: float, units: str = DEFAULT_UNITS) -> str:
    """Format a wind speed with its unit, e.g. "3.6 m/s"."""
    return f"{speed} {WIND_SPEED_UNITS.get(units, WIND_SPEED_UNITS[DEFAULT_UNITS])}"


def format_visibility(visibility_m: int) -> str:
    """Format visibility in kilometers with one decimal.

    Args:
        visibility_m: Visibility in meters.

    Returns:
        Formatted visibility, e.g. "10.0 km".
    """
    return f"{visibility_m / METERS_PER_KILOMETER:.1f} km"


def format_pressure(pressure_hpa: int) -> str:
    """Format pressure in hectopascals."""
    return f"{pressure_hpa} hPa"


def format_humidity(humidity: int) -> str:
    """Format relative humidity as a percentage."""
    return f"{humidity}%"


def capitalize_first(text: str) -> str:
    """Uppercase the first character and leave the rest untouched."""
    return text[:1].upper() + text[1:]
