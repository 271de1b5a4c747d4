"""Module initialization."""

from weather_lookup.utils.formatting import (
    capitalize_first,
    format_temperature,
    format_visibility,
    icon_url,
    round_half_up,
)
from weather_lookup.utils.path_utils import path_resolver
from weather_lookup.utils.storage import JsonFileStorage, KeyValueStorage, MemoryStorage
from weather_lookup.utils.validation import is_valid_input, require_city_name

__all__ = [
    # Formatting
    "capitalize_first",
    "format_temperature",
    "format_visibility",
    "icon_url",
    "round_half_up",
    # Paths
    "path_resolver",
    # Storage
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    # Validation
    "is_valid_input",
    "require_city_name",
]
