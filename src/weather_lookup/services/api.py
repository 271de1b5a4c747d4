"""Weather API client for interacting with OpenWeatherMap services.

Provides functionality to fetch current conditions for a city name and the
5 day / 3 hour forecast for a coordinate pair from the OpenWeatherMap 2.5
API. This module handles all external API communication for the application.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from weather_lookup.constants import OWM_CURRENT_PATH, OWM_FORECAST_PATH
from weather_lookup.exceptions import (
    APIAuthenticationError,
    CityNotFoundError,
    ForecastUnavailableError,
    InvalidAPIResponseError,
    MissingConfigError,
    TransportError,
    UpstreamError,
    chain_exception,
)
from weather_lookup.models.config import WeatherConfig
from weather_lookup.models.weather import CurrentConditions, ForecastSample


class WeatherAPIClient:
    """Client for the OpenWeatherMap API.

    Current conditions failures are mapped to specific error kinds so they can
    be shown to the user. Forecast failures all collapse into
    ForecastUnavailableError because callers treat the forecast as optional.
    Nothing is retried.

    Attributes:
        config: Weather API configuration including API key and units
        logger: Logger instance for tracking API operations
    """

    def __init__(self, config: WeatherConfig) -> None:
        """Initialize the API client.

        Args:
            config: Weather API configuration including API key, base URL,
                units preference and request timeout.
        """
        self.config = config
        self.logger = logging.getLogger(__name__)

    @property
    def current_url(self) -> str:
        """Endpoint for current conditions."""
        return f"{self.config.base_url}{OWM_CURRENT_PATH}"

    @property
    def forecast_url(self) -> str:
        """Endpoint for the 5 day / 3 hour forecast."""
        return f"{self.config.base_url}{OWM_FORECAST_PATH}"

    def _ensure_configured(self) -> None:
        """Check that a real API key is configured.

        Raises:
            MissingConfigError: If the key is empty or still the placeholder.
        """
        if not self.config.is_configured:
            raise MissingConfigError(
                "API key not configured. Please add your OpenWeatherMap API key to config.yaml",
                {"field": "api_key", "config_section": "weather"},
            )

    def _api_key_prefix(self) -> str:
        return self.config.api_key[:8] + "..."

    async def fetch_current(self, city_name: str) -> CurrentConditions:
        """Fetch current weather conditions for a city.

        The city name is sent as given; validation is the caller's job.

        Args:
            city_name: City to look up.

        Returns:
            Current conditions parsed from the API response.

        Raises:
            MissingConfigError: If no API key is configured. No request is made.
            CityNotFoundError: If the API responds with 404.
            APIAuthenticationError: If the API responds with 401.
            UpstreamError: For any other non-success status.
            TransportError: If the request fails without a response.
            InvalidAPIResponseError: If the response body cannot be parsed.
        """
        self._ensure_configured()

        params = {
            "q": city_name,
            "units": self.config.units,
            "appid": self.config.api_key,
        }

        self.logger.info(f"Fetching current weather for '{city_name}'")

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                response = await client.get(self.current_url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            self.logger.error(f"HTTP {status_code} fetching current weather for '{city_name}'")
            if status_code == 404:
                raise chain_exception(
                    CityNotFoundError(
                        city_name,
                        {"endpoint": self.current_url},
                        response_body=e.response.text,
                    ),
                    e
                ) from e
            if status_code == 401:
                raise chain_exception(
                    APIAuthenticationError(
                        "Invalid API key. Please check your configuration.",
                        {
                            "api_key_prefix": self._api_key_prefix(),
                            "endpoint": self.current_url
                        },
                        status_code=401,
                        response_body=e.response.text
                    ),
                    e
                ) from e
            raise chain_exception(
                UpstreamError(
                    status_code,
                    e.response.reason_phrase,
                    {"endpoint": self.current_url, "city": city_name},
                    response_body=e.response.text,
                ),
                e
            ) from e
        except httpx.RequestError as e:
            self.logger.error(f"Request error fetching current weather for '{city_name}': {e}")
            raise chain_exception(
                TransportError(
                    "Failed to fetch weather data. Please try again.",
                    {
                        "endpoint": self.current_url,
                        "city": city_name,
                        "error": str(e) or type(e).__name__,
                    },
                ),
                e
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise chain_exception(
                InvalidAPIResponseError(
                    "Invalid response from weather service",
                    {"endpoint": self.current_url, "error": str(e)},
                    status_code=response.status_code,
                    response_body=response.text,
                ),
                e
            ) from e

        return self._parse_current(data)

    def _parse_current(self, data: dict[str, Any]) -> CurrentConditions:
        """Parse a current conditions response body.

        Args:
            data: Decoded JSON body from the /weather endpoint.

        Returns:
            CurrentConditions model instance.

        Raises:
            InvalidAPIResponseError: If required fields are missing or invalid.
        """
        try:
            main = data["main"]
            condition = data["weather"][0]
            return CurrentConditions(
                name=data["name"],
                temp=main["temp"],
                feels_like=main["feels_like"],
                humidity=main["humidity"],
                pressure=main["pressure"],
                wind_speed=data["wind"]["speed"],
                visibility=data["visibility"],
                main=condition["main"],
                description=condition["description"],
                icon=condition["icon"],
                dt=data["dt"],
                lat=data["coord"]["lat"],
                lon=data["coord"]["lon"],
            )
        except (KeyError, IndexError, TypeError, ValidationError) as e:
            raise chain_exception(
                InvalidAPIResponseError(
                    "Invalid response from weather service",
                    {
                        "endpoint": self.current_url,
                        "expected_fields": ["name", "main", "weather", "wind", "coord"],
                        "error": str(e),
                    },
                    status_code=200,
                    response_body=str(data),
                ),
                e
            ) from e

    async def fetch_forecast(self, lat: float, lon: float) -> list[ForecastSample]:
        """Fetch the 5 day / 3 hour forecast for a coordinate pair.

        Args:
            lat: Latitude.
            lon: Longitude.

        Returns:
            Forecast samples in the order the API returned them.

        Raises:
            ForecastUnavailableError: For any failure, whatever the cause.
        """
        params = {
            "lat": lat,
            "lon": lon,
            "units": self.config.units,
            "appid": self.config.api_key,
        }

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                response = await client.get(self.forecast_url, params=params)
                response.raise_for_status()
                return self._parse_forecast(response.json())
        except (httpx.HTTPError, ValueError, KeyError, IndexError, TypeError) as e:
            status_code = (
                e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
            )
            self.logger.error(f"Forecast fetch failed for ({lat}, {lon}): {e}")
            raise chain_exception(
                ForecastUnavailableError(
                    "Failed to fetch forecast data",
                    {"endpoint": self.forecast_url, "lat": lat, "lon": lon},
                    status_code=status_code,
                ),
                e
            ) from e

    @staticmethod
    def _parse_forecast(data: dict[str, Any]) -> list[ForecastSample]:
        """Parse a forecast response body into samples.

        Args:
            data: Decoded JSON body from the /forecast endpoint.

        Returns:
            List of ForecastSample in response order.
        """
        return [
            ForecastSample(
                dt=item["dt"],
                temp=item["main"]["temp"],
                main=item["weather"][0]["main"],
                icon=item["weather"][0]["icon"],
            )
            for item in data["list"]
        ]
