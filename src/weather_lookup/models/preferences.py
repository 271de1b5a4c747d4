"""Models for persisted user preferences and search results."""

from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, Field, computed_field

from weather_lookup.constants import ERROR_DISPLAY_SECONDS
from weather_lookup.models.weather import CurrentConditions, DaySummary


class Theme(str, Enum):
    """Color theme preference."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def toggled(self) -> "Theme":
        """The opposite theme."""
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK

    @property
    def toggle_icon(self) -> str:
        """Icon offered for switching away from this theme."""
        return "☀️" if self is Theme.DARK else "🌙"


class FavoriteEntry(BaseModel):
    """A saved city with the rounded temperature seen when it was saved."""

    name: str
    temp: int


class ErrorNotice(BaseModel):
    """A user-visible error message that dismisses itself after a fixed window."""

    message: str
    kind: str
    created_at: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def expires_at(self) -> datetime:
        """Time after which the notice is no longer shown."""
        return self.created_at + timedelta(seconds=ERROR_DISPLAY_SECONDS)

    def is_visible(self, now: datetime | None = None) -> bool:
        """Check whether the notice should still be displayed.

        Args:
            now: Reference time, defaults to the current time.

        Returns:
            True while inside the display window.
        """
        return (now or datetime.now()) < self.expires_at


class SearchResult(BaseModel):
    """Outcome of one city search."""

    request_id: int
    query: str
    conditions: CurrentConditions | None = None
    forecast: list[DaySummary] = Field(default_factory=list)
    error: ErrorNotice | None = None

    @property
    def ok(self) -> bool:
        """True when current conditions were retrieved."""
        return self.conditions is not None
