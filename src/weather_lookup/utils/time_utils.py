"""Date formatting utilities for forecast grouping and display.

All timestamps are interpreted in the local time zone. Month and weekday
names follow the default C locale, which yields the fixed en-US names.
"""

from datetime import datetime

from weather_lookup.constants import DAY_KEY_FORMAT, LONG_DATE_FORMAT, WEEKDAY_FORMAT


def to_local_datetime(timestamp: int | float) -> datetime:
    """Convert a Unix timestamp to a naive local datetime."""
    return datetime.fromtimestamp(timestamp)


def format_day_key(timestamp: int | float) -> str:
    """Format the calendar day of a timestamp as a short month and day.

    Args:
        timestamp: Unix timestamp in seconds.

    Returns:
        Day key such as "Jan 5" (day number without padding).
    """
    dt = to_local_datetime(timestamp)
    return f"{dt.strftime(DAY_KEY_FORMAT)} {dt.day}"


def format_weekday(timestamp: int | float) -> str:
    """Format the short weekday name of a timestamp, e.g. "Fri"."""
    return to_local_datetime(timestamp).strftime(WEEKDAY_FORMAT)


def format_long_date(timestamp: int | float) -> str:
    """Format a timestamp as a long date.

    Args:
        timestamp: Unix timestamp in seconds.

    Returns:
        Date such as "Friday, January 5, 2024".
    """
    dt = to_local_datetime(timestamp)
    return f"{dt.strftime(LONG_DATE_FORMAT)} {dt.day}, {dt.year}"
