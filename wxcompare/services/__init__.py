"""Service-layer helpers for the weather store."""

from .availability import calendar_day, calendar_day_key, has_full_coverage
from .weather_store import WeatherStore, WeatherStoreState, get_weather_store

__all__ = [
    "WeatherStore",
    "WeatherStoreState",
    "calendar_day",
    "calendar_day_key",
    "get_weather_store",
    "has_full_coverage",
]
