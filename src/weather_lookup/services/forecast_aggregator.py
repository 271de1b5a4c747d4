"""Forecast aggregation into per-day summaries.

Groups raw 3-hour forecast samples by local calendar day and computes the
extrema, mean and representative icon for each day.
"""

import logging
from collections.abc import Iterable

from weather_lookup.constants import FORECAST_DAYS_TO_SHOW, FORECAST_DAYS_TO_SKIP
from weather_lookup.models.weather import DaySummary, ForecastSample
from weather_lookup.utils.time_utils import format_day_key, format_weekday

logger = logging.getLogger(__name__)


class ForecastAggregator:
    """Summarizes forecast samples into a short list of days.

    The first day found is dropped since it is today and already partly
    over. At most `days_to_show` of the following days are kept.

    Attributes:
        days_to_skip: Number of leading day groups to drop
        days_to_show: Maximum number of day summaries returned
    """

    def __init__(
        self,
        days_to_skip: int = FORECAST_DAYS_TO_SKIP,
        days_to_show: int = FORECAST_DAYS_TO_SHOW,
    ) -> None:
        self.days_to_skip = days_to_skip
        self.days_to_show = days_to_show

    def summarize(self, samples: Iterable[ForecastSample]) -> list[DaySummary]:
        """Summarize samples into per-day forecasts.

        Args:
            samples: Forecast samples in chronological order.

        Returns:
            Day summaries in the order the days first appear, between 0 and
            `days_to_show` entries long.
        """
        groups = self._group_by_day(samples)
        kept = list(groups.items())[self.days_to_skip:self.days_to_skip + self.days_to_show]

        summaries = [self._summarize_day(day, day_samples) for day, day_samples in kept]
        logger.debug(f"Summarized {len(groups)} forecast days into {len(summaries)}")
        return summaries

    @staticmethod
    def _group_by_day(samples: Iterable[ForecastSample]) -> dict[str, list[ForecastSample]]:
        """Group samples by their local calendar day key.

        Dict insertion order keeps the groups in first-seen order, and each
        group keeps its samples in input order.

        Args:
            samples: Forecast samples.

        Returns:
            Mapping of day key (e.g. "Jan 5") to that day's samples.
        """
        groups: dict[str, list[ForecastSample]] = {}
        for sample in samples:
            groups.setdefault(format_day_key(sample.dt), []).append(sample)
        return groups

    @staticmethod
    def _summarize_day(day: str, samples: list[ForecastSample]) -> DaySummary:
        """Build the summary for one non-empty day group.

        Args:
            day: Day key for the group.
            samples: Samples in the group, chronological.

        Returns:
            DaySummary with unrounded temperatures.
        """
        temps = [sample.temp for sample in samples]
        # Middle sample stands in for the day, roughly midday
        middle_index = len(samples) // 2
        representative = samples[middle_index] if middle_index < len(samples) else samples[0]

        return DaySummary(
            day=day,
            day_name=format_weekday(samples[0].dt),
            samples=samples,
            max_temp=max(temps),
            min_temp=min(temps),
            avg_temp=sum(temps) / len(temps),
            icon=representative.icon,
            description=samples[0].main,
        )
