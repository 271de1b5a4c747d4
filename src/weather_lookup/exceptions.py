"""Custom exception hierarchy for the weather lookup application.

This module defines domain-specific exceptions to provide better error handling,
clearer intent, and improved debugging capabilities throughout the application.

Exception Hierarchy:
    WeatherLookupError (Base)
    ├── ConfigurationError
    │   ├── MissingConfigError
    │   ├── ConfigFileNotFoundError
    │   └── InvalidConfigError
    ├── InvalidCityNameError
    ├── StorageError
    ├── NetworkError
    │   └── TransportError
    └── APIError
        ├── CityNotFoundError
        ├── APIAuthenticationError
        ├── UpstreamError
        ├── InvalidAPIResponseError
        └── ForecastUnavailableError
"""

from typing import Any


# Base Exception
class WeatherLookupError(Exception):
    """Base exception for all weather lookup application errors.

    This is the root exception that all custom exceptions inherit from,
    allowing for broad exception handling when needed. The message is
    written for the end user; details carry debugging context.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the exception with message and optional details.

        Args:
            message: Human-readable error description
            details: Optional dictionary containing additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Configuration Exceptions
class ConfigurationError(WeatherLookupError):
    """Base exception for configuration-related errors."""
    pass


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing.

    Example:
        raise MissingConfigError(
            "API key not configured",
            {"field": "api_key", "config_section": "weather"}
        )
    """
    pass


class ConfigFileNotFoundError(ConfigurationError):
    """Raised when configuration file cannot be found.

    Example:
        raise ConfigFileNotFoundError(
            "Configuration file not found",
            {"path": "./config.yaml", "search_paths": ["/home/user/.config"]}
        )
    """
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration file cannot be read, parsed or validated.

    Example:
        raise InvalidConfigError(
            "Invalid configuration file: config.yaml",
            {"path": "config.yaml", "error": "Units must be one of: metric, imperial, standard"}
        )
    """
    pass


# Input Exceptions
class InvalidCityNameError(WeatherLookupError):
    """Raised when a city name is empty or whitespace only."""
    pass


# Storage Exceptions
class StorageError(WeatherLookupError):
    """Raised when persisted preferences cannot be read or decoded.

    Example:
        raise StorageError(
            "Stored favorites are not valid JSON",
            {"key": "favorites"}
        )
    """
    pass


# Network Exceptions
class NetworkError(WeatherLookupError):
    """Base exception for network-related errors."""
    pass


class TransportError(NetworkError):
    """Raised when a request fails before any HTTP response is received.

    Example:
        raise TransportError(
            "Failed to fetch weather data. Please try again.",
            {"endpoint": "https://api.openweathermap.org/data/2.5/weather"}
        )
    """
    pass


# API Exceptions
class APIError(WeatherLookupError):
    """Base exception for API-related errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        response_body: str | None = None
    ) -> None:
        """Initialize API exception with additional context.

        Args:
            message: Human-readable error description
            details: Optional dictionary containing additional error context
            status_code: HTTP status code if applicable
            response_body: Raw response body for debugging
        """
        super().__init__(message, details)
        self.status_code = status_code
        self.response_body = response_body


class CityNotFoundError(APIError):
    """Raised when the current conditions endpoint does not know the city.

    Example:
        raise CityNotFoundError("Zzzqx", response_body='{"cod":"404"}')
    """

    def __init__(
        self,
        city_name: str,
        details: dict[str, Any] | None = None,
        response_body: str | None = None,
    ) -> None:
        """Initialize with the city name that was not found.

        Args:
            city_name: City name as it was requested
            details: Optional dictionary containing additional error context
            response_body: Raw response body for debugging
        """
        super().__init__(
            f'City "{city_name}" not found. Please check the spelling.',
            details,
            status_code=404,
            response_body=response_body,
        )
        self.city_name = city_name


class APIAuthenticationError(APIError):
    """Raised when API authentication fails.

    Example:
        raise APIAuthenticationError(
            "Invalid API key. Please check your configuration.",
            {"api_key_prefix": "abc123...", "endpoint": "/weather"},
            status_code=401
        )
    """
    pass


class UpstreamError(APIError):
    """Raised for any other non-success status from the weather API.

    Example:
        raise UpstreamError(503, "Service Unavailable")
    """

    def __init__(
        self,
        status_code: int,
        status_text: str,
        details: dict[str, Any] | None = None,
        response_body: str | None = None,
    ) -> None:
        """Initialize with the HTTP status of the failed response.

        Args:
            status_code: HTTP status code
            status_text: HTTP reason phrase
            details: Optional dictionary containing additional error context
            response_body: Raw response body for debugging
        """
        super().__init__(
            f"API Error: {status_code} {status_text}".rstrip(),
            details,
            status_code=status_code,
            response_body=response_body,
        )
        self.status_text = status_text


class InvalidAPIResponseError(APIError):
    """Raised when API returns invalid or malformed response.

    Example:
        raise InvalidAPIResponseError(
            "Invalid API response format",
            {"expected_fields": ["main", "coord"], "error": "'main'"},
            status_code=200,
            response_body='{"name": "Paris"}'
        )
    """
    pass


class ForecastUnavailableError(APIError):
    """Raised when the forecast cannot be fetched for any reason.

    The forecast is optional for callers, so the cause is not
    distinguished beyond the chained exception.
    """
    pass


# Utility function for exception chaining
def chain_exception(new_exception: WeatherLookupError, cause: Exception) -> WeatherLookupError:
    """Chain a new exception with its underlying cause.

    This utility function ensures proper exception chaining for better
    debugging and error tracking.

    Args:
        new_exception: The new domain-specific exception to raise
        cause: The underlying exception that caused this error

    Returns:
        The new exception with cause properly chained

    Example:
        try:
            response = await client.get(url)
        except httpx.RequestError as e:
            raise chain_exception(
                TransportError("Failed to fetch weather", {"url": url}),
                e
            ) from e
    """
    new_exception.__cause__ = cause
    return new_exception
