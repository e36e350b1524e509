"""Request and response models for the store's HTTP surface."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from .weather import TimeRange


class SampleDataSetInfo(BaseModel):
    """A bundled sample dataset as advertised to the UI."""

    location: str = Field(..., description="Human-readable dataset label")
    data: str = Field(..., description="Static path of the dataset JSON")
    location_key: str = Field(..., description="Key the dataset is stored under")


class SampleLoadRequest(BaseModel):
    dataset_key: Optional[str] = Field(
        default=None, description="Dataset label; the first dataset when omitted",
    )


class LocationSummary(BaseModel):
    """Loaded location with its provider metadata and data span."""

    location: str
    resolved_address: Optional[str] = None
    timezone: Optional[str] = None
    metric_count: int = Field(..., description="Number of hourly metrics stored")
    available_range: Optional[TimeRange] = None


class LocationSelectionRequest(BaseModel):
    location: Optional[str] = Field(default=None, description="Location key to select")


class BufferHoursRequest(BaseModel):
    hours: float = Field(..., ge=0, description="Symmetric range-query buffer in hours")


class DateSelectionRequest(BaseModel):
    day: date = Field(..., description="Calendar day to toggle")


class DatesSelectionRequest(BaseModel):
    dates: list[date] = Field(default_factory=list)


class SelectionResponse(BaseModel):
    """Current selection state of the store."""

    selected_location: Optional[str] = None
    selected_time_range: Optional[TimeRange] = None
    selected_dates: list[str] = Field(
        default_factory=list, description="Selected days as YYYY-MM-DD strings",
    )
    buffer_hours: float


__all__ = [
    "BufferHoursRequest",
    "DateSelectionRequest",
    "DatesSelectionRequest",
    "LocationSelectionRequest",
    "LocationSummary",
    "SampleDataSetInfo",
    "SampleLoadRequest",
    "SelectionResponse",
]
