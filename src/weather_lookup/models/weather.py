"""Weather data models used throughout the application.

Defines Pydantic models for current conditions, raw forecast samples and
the per-day forecast summaries derived from them.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, computed_field

from weather_lookup.constants import CURRENT_ICON_SIZE, FORECAST_ICON_SIZE
from weather_lookup.utils import formatting


class CurrentConditions(BaseModel):
    """Current weather conditions for a city."""

    model_config = ConfigDict(frozen=True)

    name: str
    temp: float
    feels_like: float
    humidity: int
    pressure: int
    wind_speed: float
    visibility: int  # meters
    main: str
    description: str
    icon: str
    dt: int
    lat: float
    lon: float

    @property
    def timestamp(self) -> datetime:
        """Convert the observation Unix timestamp to a local datetime.

        Returns:
            A datetime object representing the observation time.
        """
        return datetime.fromtimestamp(self.dt)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def icon_url(self) -> str:
        """Large icon asset URL for the current condition."""
        return formatting.icon_url(self.icon, CURRENT_ICON_SIZE)


class ForecastSample(BaseModel):
    """One 3-hour forecast sample."""

    model_config = ConfigDict(frozen=True)

    dt: int
    temp: float
    main: str
    icon: str

    @property
    def timestamp(self) -> datetime:
        """Convert Unix timestamp to a local datetime.

        Returns:
            A datetime object representing the time of this sample.
        """
        return datetime.fromtimestamp(self.dt)


class DaySummary(BaseModel):
    """Forecast summary for one calendar day.

    Temperatures are kept unrounded; rounding happens at display time.
    The description is the first sample's label while the icon comes from
    the middle sample, so the two can disagree.
    """

    day: str  # e.g. "Jan 5"
    day_name: str  # e.g. "Fri"
    samples: list[ForecastSample]
    max_temp: float
    min_temp: float
    avg_temp: float
    icon: str
    description: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def icon_url(self) -> str:
        """Small icon asset URL for the day."""
        return formatting.icon_url(self.icon, FORECAST_ICON_SIZE)
