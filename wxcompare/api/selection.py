"""Selection state endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wxcompare.models import (
    DateSelectionRequest,
    DatesSelectionRequest,
    SelectionResponse,
    TimeRange,
)
from wxcompare.models.selection import BufferHoursRequest, LocationSelectionRequest
from wxcompare.services import WeatherStore, calendar_day_key, get_weather_store

router = APIRouter(prefix="/api/v1/selection", tags=["selection"])


def build_selection_response(store: WeatherStore) -> SelectionResponse:
    state = store.state
    return SelectionResponse(
        selected_location=state.selected_location,
        selected_time_range=state.selected_time_range,
        selected_dates=[calendar_day_key(d, store.tz) for d in state.selected_dates],
        buffer_hours=state.buffer_hours,
    )


@router.get("", response_model=SelectionResponse, summary="Current selection")
def get_selection(store: WeatherStore = Depends(get_weather_store)) -> SelectionResponse:
    return build_selection_response(store)


@router.put("/location", response_model=SelectionResponse, summary="Select a location")
def put_location(
    request: LocationSelectionRequest, store: WeatherStore = Depends(get_weather_store)
) -> SelectionResponse:
    store.set_selected_location(request.location)
    return build_selection_response(store)


@router.put("/time-range", response_model=SelectionResponse, summary="Select a time range")
def put_time_range(
    request: TimeRange, store: WeatherStore = Depends(get_weather_store)
) -> SelectionResponse:
    store.set_selected_time_range(request)
    return build_selection_response(store)


@router.put(
    "/buffer-hours", response_model=SelectionResponse, summary="Set the range buffer"
)
def put_buffer_hours(
    request: BufferHoursRequest, store: WeatherStore = Depends(get_weather_store)
) -> SelectionResponse:
    store.set_buffer_hours(request.hours)
    return build_selection_response(store)


@router.post(
    "/dates/toggle", response_model=SelectionResponse, summary="Toggle a calendar day"
)
def toggle_date(
    request: DateSelectionRequest, store: WeatherStore = Depends(get_weather_store)
) -> SelectionResponse:
    store.toggle_date_selection(request.day)
    return build_selection_response(store)


@router.put("/dates", response_model=SelectionResponse, summary="Replace selected days")
def put_dates(
    request: DatesSelectionRequest, store: WeatherStore = Depends(get_weather_store)
) -> SelectionResponse:
    store.set_selected_dates(request.dates)
    return build_selection_response(store)


@router.delete("/dates", response_model=SelectionResponse, summary="Clear selected days")
def clear_dates(store: WeatherStore = Depends(get_weather_store)) -> SelectionResponse:
    store.clear_selected_dates()
    return build_selection_response(store)
