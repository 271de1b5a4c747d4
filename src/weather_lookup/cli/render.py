"""Plain-text rendering of search results and favorites for the terminal."""

from weather_lookup.models.preferences import FavoriteEntry, SearchResult, Theme
from weather_lookup.models.weather import CurrentConditions, DaySummary
from weather_lookup.utils.formatting import (
    capitalize_first,
    format_humidity,
    format_pressure,
    format_temperature,
    format_visibility,
    format_wind_speed,
)
from weather_lookup.utils.time_utils import format_long_date


def render_current(conditions: CurrentConditions, units: str) -> list[str]:
    """Render the current conditions block."""
    return [
        conditions.name,
        format_long_date(conditions.dt),
        f"{format_temperature(conditions.temp, units)}  "
        f"{capitalize_first(conditions.description)}",
        f"Feels like {format_temperature(conditions.feels_like, units)}",
        f"Wind: {format_wind_speed(conditions.wind_speed, units)}",
        f"Humidity: {format_humidity(conditions.humidity)}",
        f"Pressure: {format_pressure(conditions.pressure)}",
        f"Visibility: {format_visibility(conditions.visibility)}",
        f"Icon: {conditions.icon_url}",
    ]


def render_forecast(days: list[DaySummary], units: str) -> list[str]:
    """Render one line per forecast day."""
    return [
        f"{day.day:<7} {day.day_name:<4} {day.description:<14} "
        f"Max: {format_temperature(day.max_temp, units):>6}  "
        f"Min: {format_temperature(day.min_temp, units):>6}"
        for day in days
    ]


def render_result(result: SearchResult, units: str) -> str:
    """Render a full search result, or its error message."""
    if result.error is not None:
        return result.error.message
    if result.conditions is None:
        return ""

    lines = render_current(result.conditions, units)
    if result.forecast:
        lines.append("")
        lines.append(f"{len(result.forecast)}-Day Forecast")
        lines.extend(render_forecast(result.forecast, units))
    return "\n".join(lines)


def render_favorites(entries: list[FavoriteEntry], units: str) -> str:
    """Render the favorites list."""
    if not entries:
        return "No favorite cities saved."
    return "\n".join(f"{entry.name}: {format_temperature(entry.temp, units)}" for entry in entries)


def render_theme(theme: Theme) -> str:
    return f"Theme: {theme.value} (toggle: {theme.toggle_icon})"
