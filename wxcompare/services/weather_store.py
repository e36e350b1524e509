"""In-memory weather store backing the comparison UI.

The store owns one immutable ``WeatherStoreState`` snapshot. Every mutator
builds a new snapshot and swaps it in with a single assignment, so readers on
the event loop always see a state either entirely before or entirely after a
mutation. Queries read the snapshot current at call time and never raise on
missing data; they return empty results instead.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import date, tzinfo
from functools import lru_cache
import logging
from operator import attrgetter
from typing import Any, Optional

from wxcompare.config import get_local_timezone, settings
from wxcompare.domain.samples import resolve_sample_dataset
from wxcompare.errors import ConversionError, WeatherStoreError
from wxcompare.ingestors.converter import convert_to_weather_metric
from wxcompare.ingestors.weather import WeatherFetcher
from wxcompare.models.weather import (
    LocationWeatherData,
    PreferredTime,
    TimeRange,
    WeatherMetric,
)
from wxcompare.services.availability import (
    calendar_day_key,
    has_full_coverage,
    iter_calendar_days,
    local_datetime,
    preferred_window,
)

logger = logging.getLogger("wxcompare.store")

MetricConverter = Callable[[Any, Any], WeatherMetric]

SECONDS_PER_HOUR = 3600


def _records(value: Any, field_name: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConversionError(
            f"Weather payload field {field_name!r} must be a list, "
            f"got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True)
class WeatherStoreState:
    """Snapshot of ingested data and the user's current selection."""

    weather_by_location: dict[str, LocationWeatherData] = field(default_factory=dict)
    selected_location: Optional[str] = None
    selected_time_range: Optional[TimeRange] = None
    selected_dates: list[date] = field(default_factory=list)
    buffer_hours: float = 2


class WeatherStore:
    """Ingest hourly provider payloads and answer range/availability queries."""

    def __init__(
        self,
        *,
        fetcher: WeatherFetcher | None = None,
        converter: MetricConverter | None = None,
        tz: tzinfo | None = None,
        buffer_hours: float | None = None,
    ) -> None:
        self.fetcher = fetcher or WeatherFetcher()
        self.converter = converter or convert_to_weather_metric
        self.tz = tz if tz is not None else get_local_timezone()
        if buffer_hours is None:
            buffer_hours = settings.default_buffer_hours
        self._state = WeatherStoreState(buffer_hours=buffer_hours)

    # ----- State accessors -----

    @property
    def state(self) -> WeatherStoreState:
        return self._state

    @property
    def weather_by_location(self) -> dict[str, LocationWeatherData]:
        return self._state.weather_by_location

    @property
    def selected_location(self) -> Optional[str]:
        return self._state.selected_location

    @property
    def selected_time_range(self) -> Optional[TimeRange]:
        return self._state.selected_time_range

    @property
    def buffer_hours(self) -> float:
        return self._state.buffer_hours

    # ----- Ingestion -----

    def set_weather_data(self, location: str, payload: Mapping[str, Any]) -> None:
        """Flatten a timeline payload into sorted metrics for ``location``.

        Each hour record becomes one metric stamped with its own
        ``datetimeEpoch``; days without hours contribute nothing. Any existing
        data for the key is replaced, never merged.
        """

        if not isinstance(payload, Mapping):
            raise ConversionError(
                f"Weather payload must be an object, got {type(payload).__name__}"
            )

        metrics: list[WeatherMetric] = []
        for day in _records(payload.get("days"), "days"):
            if not isinstance(day, Mapping):
                continue
            for hour in _records(day.get("hours"), "hours"):
                epoch = hour.get("datetimeEpoch") if isinstance(hour, Mapping) else None
                metrics.append(self.converter(hour, epoch))

        metrics.sort(key=attrgetter("timestamp"))

        location_data = LocationWeatherData(
            location=location,
            metrics=metrics,
            resolved_address=payload.get("resolvedAddress"),
            timezone=payload.get("timezone"),
        )
        self._state = replace(
            self._state,
            weather_by_location={
                **self._state.weather_by_location,
                location: location_data,
            },
        )
        logger.info("Stored %s metrics for location %s", len(metrics), location)

    # ----- Selection mutators -----

    def set_selected_location(self, location: Optional[str]) -> None:
        self._state = replace(self._state, selected_location=location)

    def set_selected_time_range(self, time_range: Optional[TimeRange]) -> None:
        self._state = replace(self._state, selected_time_range=time_range)

    def set_buffer_hours(self, hours: float) -> None:
        self._state = replace(self._state, buffer_hours=hours)

    def toggle_date_selection(self, value: date) -> None:
        """Add ``value`` unless a date on the same calendar day is selected,
        in which case that entry is removed instead."""

        key = calendar_day_key(value, self.tz)
        current = self._state.selected_dates
        selected = [d for d in current if calendar_day_key(d, self.tz) != key]
        if len(selected) == len(current):
            selected.append(value)
        self._state = replace(self._state, selected_dates=selected)

    def clear_selected_dates(self) -> None:
        self._state = replace(self._state, selected_dates=[])

    def set_selected_dates(self, dates: Iterable[date]) -> None:
        # No dedup here; callers pass day-unique input
        self._state = replace(self._state, selected_dates=list(dates))

    def get_selected_dates(self) -> list[date]:
        return self._state.selected_dates

    # ----- Loaders -----

    async def load_sample_data(self, dataset_key: str | None = None) -> None:
        """Fetch a bundled sample dataset and select it.

        The dataset is stored under the first word of its label, which is the
        ZIP code for every sample that has one.
        """

        try:
            logger.info("Loading sample weather data...")
            dataset = resolve_sample_dataset(dataset_key)
            payload = await self.fetcher.fetch_sample(dataset)
            location_key = dataset.location_key
            self.set_weather_data(location_key, payload)
            self.set_selected_location(location_key)
        except WeatherStoreError as exc:
            logger.error("Failed to load sample weather data: %s", exc)
            raise
        except Exception:
            logger.exception("Failed to load sample weather data")
            raise

    async def load_weather_data(self, location: str) -> None:
        """Fetch live data for ``location`` from the weather API and select it."""

        try:
            payload = await self.fetcher.fetch_location(location)
            self.set_weather_data(location, payload)
            self.set_selected_location(location)
        except WeatherStoreError as exc:
            logger.error("Failed to load weather data for %s: %s", location, exc)
            raise
        except Exception:
            logger.exception("Failed to load weather data for %s", location)
            raise

    # ----- Queries -----

    def get_location_data(self, location: Optional[str]) -> Optional[LocationWeatherData]:
        if not location:
            return None
        return self._state.weather_by_location.get(location)

    def list_locations(self) -> list[str]:
        return list(self._state.weather_by_location)

    def get_weather_for_time_range(
        self, location: Optional[str], time_range: TimeRange
    ) -> list[WeatherMetric]:
        """Metrics inside ``time_range`` widened by ``buffer_hours`` on both ends."""

        state = self._state
        location_data = self.get_location_data(location)
        if location_data is None:
            return []

        buffer_seconds = state.buffer_hours * SECONDS_PER_HOUR
        lower = time_range.start - buffer_seconds
        upper = time_range.end + buffer_seconds
        return [m for m in location_data.metrics if lower <= m.timestamp <= upper]

    def get_available_time_range(self, location: Optional[str]) -> Optional[TimeRange]:
        location_data = self.get_location_data(location)
        if location_data is None or not location_data.metrics:
            return None

        timestamps = [m.timestamp for m in location_data.metrics]
        return TimeRange(start=min(timestamps), end=max(timestamps))

    def get_available_dates(
        self, location: Optional[str], preferred_time: PreferredTime
    ) -> list[date]:
        """Calendar days whose preferred hour window has a reading in every hour.

        The window for each day is anchored to that day alone. A window that
        wraps midnight therefore yields an inverted range and only matches when
        the buffer is wide enough to make it non-empty.
        """

        if not location:
            return []

        span = self.get_available_time_range(location)
        if span is None:
            return []

        available: list[date] = []
        for day in iter_calendar_days(span, self.tz):
            window = preferred_window(day, preferred_time, self.tz)
            metrics = self.get_weather_for_time_range(location, window)
            hours = {local_datetime(m.timestamp, self.tz).hour for m in metrics}
            if has_full_coverage(hours, preferred_time):
                available.append(day)

        logger.debug(
            "Location %s has %s available dates for hours %s-%s",
            location,
            len(available),
            preferred_time.start_hour,
            preferred_time.end_hour,
        )
        return available


@lru_cache(maxsize=1)
def get_weather_store() -> WeatherStore:
    """Return the process-wide store shared by the API routes."""

    return WeatherStore()


__all__ = ["WeatherStore", "WeatherStoreState", "get_weather_store"]
