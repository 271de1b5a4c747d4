"""Application-wide constants for the weather lookup client.

This module centralizes all constants used throughout the application to
ensure consistency and maintainability. Constants are organized into logical
categories for easier reference and documentation.

Constants are grouped into the following categories:
- Path Constants: Directory and file names for configuration and storage
- OpenWeatherMap API: Endpoints, units and icon asset URLs
- Storage Constants: Keys for persisted preferences
- Forecast Constants: Day grouping and display limits
- Display Constants: Formatting values shared by the CLI and server
"""

# Path constants
APP_DIR_NAME = "weather-lookup"  # Directory name for config and data
CONFIG_FILENAME = "config.yaml"  # Default configuration filename
STORAGE_FILENAME = "storage.json"  # Default persisted storage filename

# Network constants
DEFAULT_SERVER_HOST = "127.0.0.1"  # Default host for server
DEFAULT_SERVER_PORT = 8000  # Default port for server
DEFAULT_TIMEOUT_SECONDS = 10.0  # HTTP request timeout in seconds

# OpenWeatherMap API
OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"  # API 2.5 base endpoint
OWM_CURRENT_PATH = "/weather"  # Current conditions endpoint
OWM_FORECAST_PATH = "/forecast"  # 5 day / 3 hour forecast endpoint
OWM_ICON_URL = "https://openweathermap.org/img/wn/{code}@{size}.png"  # Icon asset template
API_KEY_PLACEHOLDER = "YOUR_API_KEY_HERE"  # Sentinel meaning "not configured"
VALID_UNITS = ["metric", "imperial", "standard"]
DEFAULT_UNITS = "metric"

# Icon sizes
CURRENT_ICON_SIZE = "4x"  # Large icon for current conditions
FORECAST_ICON_SIZE = "2x"  # Small icon for forecast days

# Storage keys
FAVORITES_STORAGE_KEY = "favorites"
THEME_STORAGE_KEY = "theme"

# Forecast constants
FORECAST_DAYS_TO_SKIP = 1  # First day is today, already partially elapsed
FORECAST_DAYS_TO_SHOW = 5  # Maximum number of forecast days returned

# Display constants
ERROR_DISPLAY_SECONDS = 5  # User-visible errors auto-dismiss after this window
METERS_PER_KILOMETER = 1000.0
TEMPERATURE_SYMBOLS = {
    "metric": "°C",
    "imperial": "°F",
    "standard": "K",
}
WIND_SPEED_UNITS = {
    "metric": "m/s",
    "imperial": "mph",
    "standard": "m/s",
}
DAY_KEY_FORMAT = "%b"  # Short month name, day appended without padding
WEEKDAY_FORMAT = "%a"  # Short weekday name
LONG_DATE_FORMAT = "%A, %B"  # Weekday and month name, day and year appended

# Messages
EMPTY_CITY_MESSAGE = "Please enter a city name"
GENERIC_FAILURE_MESSAGE = "Failed to fetch weather data. Please try again."
