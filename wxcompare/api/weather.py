"""Weather loading and query endpoints."""

from __future__ import annotations

from datetime import date
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from wxcompare.domain import SAMPLE_DATA_SETS
from wxcompare.errors import (
    ConversionError,
    DatasetKeyError,
    WeatherStoreError,
)
from wxcompare.models import (
    LocationSummary,
    PreferredTime,
    SampleDataSetInfo,
    SampleLoadRequest,
    SelectionResponse,
    TimeRange,
    WeatherMetric,
)
from wxcompare.services import WeatherStore, get_weather_store

from .selection import build_selection_response

router = APIRouter(prefix="/api/v1", tags=["weather"])

logger = logging.getLogger("wxcompare.api.weather")


def _load_error(exc: WeatherStoreError) -> HTTPException:
    if isinstance(exc, DatasetKeyError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ConversionError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


def _summarize(store: WeatherStore, location: str) -> LocationSummary:
    data = store.get_location_data(location)
    if data is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No weather data loaded for {location}",
        )
    return LocationSummary(
        location=data.location,
        resolved_address=data.resolved_address,
        timezone=data.timezone,
        metric_count=len(data.metrics),
        available_range=store.get_available_time_range(location),
    )


@router.get(
    "/samples",
    response_model=list[SampleDataSetInfo],
    summary="List bundled sample datasets",
)
def list_samples() -> list[SampleDataSetInfo]:
    return [
        SampleDataSetInfo(
            location=dataset.location,
            data=dataset.data,
            location_key=dataset.location_key,
        )
        for dataset in SAMPLE_DATA_SETS
    ]


@router.post(
    "/samples/load",
    response_model=SelectionResponse,
    summary="Load a sample dataset and select it",
)
async def load_sample(
    request: SampleLoadRequest | None = None,
    store: WeatherStore = Depends(get_weather_store),
) -> SelectionResponse:
    dataset_key = request.dataset_key if request else None
    try:
        await store.load_sample_data(dataset_key)
    except WeatherStoreError as exc:
        raise _load_error(exc) from exc
    return build_selection_response(store)


@router.post(
    "/locations/{location}/load",
    response_model=SelectionResponse,
    summary="Fetch live weather for a location and select it",
)
async def load_location(
    location: str, store: WeatherStore = Depends(get_weather_store)
) -> SelectionResponse:
    try:
        await store.load_weather_data(location)
    except WeatherStoreError as exc:
        raise _load_error(exc) from exc
    return build_selection_response(store)


@router.get(
    "/locations",
    response_model=list[LocationSummary],
    summary="List loaded locations",
)
def list_locations(store: WeatherStore = Depends(get_weather_store)) -> list[LocationSummary]:
    return [_summarize(store, location) for location in store.list_locations()]


@router.get(
    "/locations/{location}",
    response_model=LocationSummary,
    summary="Describe a loaded location",
)
def get_location(
    location: str, store: WeatherStore = Depends(get_weather_store)
) -> LocationSummary:
    return _summarize(store, location)


@router.get(
    "/locations/{location}/metrics",
    response_model=list[WeatherMetric],
    summary="Metrics in a time range plus the configured buffer",
)
def get_metrics(
    location: str,
    start: int = Query(..., description="Range start (epoch seconds)"),
    end: int = Query(..., description="Range end (epoch seconds)"),
    store: WeatherStore = Depends(get_weather_store),
) -> list[WeatherMetric]:
    return store.get_weather_for_time_range(location, TimeRange(start=start, end=end))


@router.get(
    "/locations/{location}/available-range",
    response_model=TimeRange | None,
    summary="Overall span of a location's data",
)
def get_available_range(
    location: str, store: WeatherStore = Depends(get_weather_store)
) -> TimeRange | None:
    return store.get_available_time_range(location)


@router.get(
    "/locations/{location}/available-dates",
    response_model=list[date],
    summary="Days with full hourly coverage of a preferred window",
)
def get_available_dates(
    location: str,
    start_hour: int = Query(..., ge=0, le=23, description="First hour of the window"),
    end_hour: int = Query(..., ge=0, le=23, description="Last hour of the window"),
    store: WeatherStore = Depends(get_weather_store),
) -> list[date]:
    preferred_time = PreferredTime(start_hour=start_hour, end_hour=end_hour)
    dates = store.get_available_dates(location, preferred_time)
    logger.info(
        "Available dates computed: location=%s window=%s-%s count=%s",
        location,
        start_hour,
        end_hour,
        len(dates),
    )
    return dates
