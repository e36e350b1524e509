"""Pydantic models for the weather store."""

from .selection import (
    DateSelectionRequest,
    DatesSelectionRequest,
    LocationSummary,
    SampleDataSetInfo,
    SampleLoadRequest,
    SelectionResponse,
)
from .weather import LocationWeatherData, PreferredTime, TimeRange, WeatherMetric

__all__ = [
    "DateSelectionRequest",
    "DatesSelectionRequest",
    "LocationSummary",
    "LocationWeatherData",
    "PreferredTime",
    "SampleDataSetInfo",
    "SampleLoadRequest",
    "SelectionResponse",
    "TimeRange",
    "WeatherMetric",
]
