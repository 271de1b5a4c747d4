"""Tests for custom exception hierarchy."""

import pytest

from weather_lookup.exceptions import (
    APIAuthenticationError,
    APIError,
    CityNotFoundError,
    ConfigFileNotFoundError,
    ConfigurationError,
    ForecastUnavailableError,
    InvalidAPIResponseError,
    InvalidCityNameError,
    InvalidConfigError,
    MissingConfigError,
    NetworkError,
    StorageError,
    TransportError,
    UpstreamError,
    WeatherLookupError,
    chain_exception,
)


class TestWeatherLookupError:
    """Test base exception class."""

    def test_base_exception_with_message_only(self) -> None:
        """Test creating exception with just a message."""
        exc = WeatherLookupError("Test error")
        assert str(exc) == "Test error"
        assert exc.message == "Test error"
        assert exc.details == {}

    def test_base_exception_with_details(self) -> None:
        """Test creating exception with message and details."""
        details = {"field": "test", "value": 123}
        exc = WeatherLookupError("Test error", details)
        assert exc.message == "Test error"
        assert exc.details == details
        assert str(exc) == "Test error - Details: {'field': 'test', 'value': 123}"

    @pytest.mark.parametrize(
        ("exc_class", "parent"),
        [
            (MissingConfigError, ConfigurationError),
            (ConfigFileNotFoundError, ConfigurationError),
            (InvalidConfigError, ConfigurationError),
            (TransportError, NetworkError),
            (APIAuthenticationError, APIError),
            (InvalidAPIResponseError, APIError),
            (ForecastUnavailableError, APIError),
            (InvalidCityNameError, WeatherLookupError),
            (StorageError, WeatherLookupError),
        ],
    )
    def test_inheritance_chain(
        self, exc_class: type[WeatherLookupError], parent: type[WeatherLookupError]
    ) -> None:
        """Test that all exceptions inherit from base."""
        exc = exc_class("Error")
        assert isinstance(exc, parent)
        assert isinstance(exc, WeatherLookupError)
        assert isinstance(exc, Exception)


class TestAPIErrors:
    """Test API exception classes."""

    def test_api_error_attributes(self) -> None:
        """Test status code and response body are kept."""
        exc = APIError("Bad", {"endpoint": "/weather"}, status_code=418, response_body="{}")
        assert exc.status_code == 418
        assert exc.response_body == "{}"
        assert exc.details == {"endpoint": "/weather"}

    def test_city_not_found(self) -> None:
        """Test the message names the city."""
        exc = CityNotFoundError("Zzzqx", response_body='{"cod":"404"}')
        assert exc.message == 'City "Zzzqx" not found. Please check the spelling.'
        assert exc.city_name == "Zzzqx"
        assert exc.status_code == 404
        assert isinstance(exc, APIError)

    def test_upstream_error(self) -> None:
        """Test the message includes status code and text."""
        exc = UpstreamError(503, "Service Unavailable")
        assert exc.message == "API Error: 503 Service Unavailable"
        assert exc.status_code == 503
        assert exc.status_text == "Service Unavailable"

    def test_upstream_error_without_text(self) -> None:
        """Test an empty status text leaves no trailing space."""
        assert UpstreamError(599, "").message == "API Error: 599"


class TestChainException:
    """Test chain_exception utility."""

    def test_chain_exception(self) -> None:
        """Test the cause is attached to the new exception."""
        cause = ValueError("Original error")
        new_exc = TransportError("Request failed")

        result = chain_exception(new_exc, cause)

        assert result is new_exc
        assert result.__cause__ is cause

    def test_chain_exception_raise(self) -> None:
        """Test chained exceptions keep their cause when raised."""
        with pytest.raises(StorageError) as exc_info:
            try:
                raise OSError("disk full")
            except OSError as e:
                raise chain_exception(StorageError("Failed to write"), e) from e

        assert isinstance(exc_info.value.__cause__, OSError)
