"""Weather data models for the comparison store."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TimeRange(BaseModel):
    """Closed window of epoch seconds. ``start <= end`` is expected, not enforced."""

    start: int = Field(..., description="Window start (epoch seconds, UTC)")
    end: int = Field(..., description="Window end (epoch seconds, UTC)")


class PreferredTime(BaseModel):
    """Hour-of-day window; ``start_hour > end_hour`` wraps past midnight."""

    start_hour: int = Field(..., ge=0, le=23, description="First hour of the window")
    end_hour: int = Field(..., ge=0, le=23, description="Last hour of the window")

    @property
    def wraps_midnight(self) -> bool:
        return self.start_hour > self.end_hour


class WeatherMetric(BaseModel):
    """One hourly observation for one location."""

    model_config = ConfigDict(frozen=True)

    timestamp: int = Field(..., description="Observation time (epoch seconds, UTC)")
    temperature: Optional[float] = Field(default=None, description="Air temperature")
    feels_like: Optional[float] = Field(
        default=None, description="Apparent temperature",
    )
    humidity: Optional[float] = Field(
        default=None, description="Relative humidity in percent",
    )
    dew_point: Optional[float] = Field(default=None, description="Dew point")
    precipitation: Optional[float] = Field(
        default=None, description="Precipitation amount",
    )
    precipitation_probability: Optional[float] = Field(
        default=None, description="Probability of precipitation in percent",
    )
    snow: Optional[float] = Field(default=None, description="Snowfall amount")
    wind_speed: Optional[float] = Field(default=None, description="Sustained wind speed")
    wind_gust: Optional[float] = Field(default=None, description="Wind gust speed")
    wind_direction: Optional[float] = Field(
        default=None, description="Wind direction in degrees",
    )
    pressure: Optional[float] = Field(default=None, description="Sea level pressure")
    cloud_cover: Optional[float] = Field(
        default=None, description="Cloud cover percentage",
    )
    visibility: Optional[float] = Field(default=None, description="Visibility distance")
    uv_index: Optional[float] = Field(default=None, description="UV index")
    conditions: Optional[str] = Field(
        default=None, description="Short textual summary of conditions",
    )
    icon: Optional[str] = Field(default=None, description="Provider icon identifier")


class LocationWeatherData(BaseModel):
    """All metrics ingested for one location key, sorted by timestamp."""

    location: str = Field(..., description="Location key, usually a ZIP code")
    metrics: list[WeatherMetric] = Field(default_factory=list)
    resolved_address: Optional[str] = Field(
        default=None, description="Address the provider resolved the query to",
    )
    timezone: Optional[str] = Field(
        default=None, description="Provider-reported timezone (informational)",
    )


__all__ = ["LocationWeatherData", "PreferredTime", "TimeRange", "WeatherMetric"]
