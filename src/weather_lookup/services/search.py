"""City search orchestration.

Ties the input validator, API client, favorites store and forecast
aggregator together into the single operation a user triggers.
"""

import itertools
import logging

from weather_lookup.constants import GENERIC_FAILURE_MESSAGE
from weather_lookup.exceptions import ForecastUnavailableError, WeatherLookupError
from weather_lookup.models.preferences import ErrorNotice, SearchResult
from weather_lookup.models.weather import CurrentConditions, DaySummary
from weather_lookup.services.api import WeatherAPIClient
from weather_lookup.services.favorites import FavoritesStore
from weather_lookup.services.forecast_aggregator import ForecastAggregator
from weather_lookup.utils.validation import require_city_name


class WeatherSearch:
    """Runs city searches and keeps the most recent result.

    Calls are awaited one after another: current conditions first, then the
    forecast using the coordinates they return. Every search gets an
    increasing request id, and `latest` only accepts the result of the most
    recently started search, so a slow earlier search cannot overwrite a
    newer one.

    Attributes:
        api_client: OpenWeatherMap client
        favorites: Store that records successfully searched cities
        aggregator: Forecast day aggregator
        latest: Result of the most recent search, if any
    """

    def __init__(
        self,
        api_client: WeatherAPIClient,
        favorites: FavoritesStore,
        aggregator: ForecastAggregator | None = None,
    ) -> None:
        self.api_client = api_client
        self.favorites = favorites
        self.aggregator = aggregator or ForecastAggregator()
        self.logger = logging.getLogger(__name__)
        self.latest: SearchResult | None = None
        self._request_ids = itertools.count(1)
        self._newest_request_id = 0

    async def search(self, raw_city: str) -> SearchResult:
        """Look up current conditions and forecast for a city.

        Errors from validation or the current conditions request are returned
        as an ErrorNotice with no conditions, which clears any earlier result.
        Forecast failures only leave the forecast empty.

        Args:
            raw_city: City name as typed by the user.

        Returns:
            SearchResult for this request.
        """
        request_id = next(self._request_ids)
        self._newest_request_id = request_id

        try:
            city = require_city_name(raw_city)
            conditions = await self.api_client.fetch_current(city)
        except WeatherLookupError as e:
            self.logger.warning(f"Search for '{raw_city}' failed: {e}")
            result = SearchResult(
                request_id=request_id,
                query=raw_city,
                error=ErrorNotice(message=e.message, kind=type(e).__name__),
            )
            return self._publish(result)
        except Exception as e:
            self.logger.exception(f"Unexpected error searching for '{raw_city}': {e}")
            result = SearchResult(
                request_id=request_id,
                query=raw_city,
                error=ErrorNotice(message=GENERIC_FAILURE_MESSAGE, kind=type(e).__name__),
            )
            return self._publish(result)

        self._record_favorite(conditions)
        forecast = await self._load_forecast(conditions)

        result = SearchResult(
            request_id=request_id,
            query=city,
            conditions=conditions,
            forecast=forecast,
        )
        return self._publish(result)

    def _record_favorite(self, conditions: CurrentConditions) -> None:
        """Save the searched city, keeping the search result if storage fails."""
        try:
            self.favorites.add(conditions.name, conditions.temp)
        except WeatherLookupError as e:
            self.logger.error(f"Could not save '{conditions.name}' to favorites: {e}")

    async def _load_forecast(self, conditions: CurrentConditions) -> list[DaySummary]:
        """Fetch and summarize the forecast; failures yield an empty list."""
        try:
            samples = await self.api_client.fetch_forecast(conditions.lat, conditions.lon)
        except ForecastUnavailableError as e:
            self.logger.warning(f"Forecast unavailable for '{conditions.name}': {e}")
            return []
        return self.aggregator.summarize(samples)

    def _publish(self, result: SearchResult) -> SearchResult:
        """Store result as latest unless a newer search has started since."""
        if result.request_id == self._newest_request_id:
            self.latest = result
        else:
            self.logger.info(
                f"Discarding stale result for request {result.request_id} "
                f"(newest is {self._newest_request_id})"
            )
        return result
