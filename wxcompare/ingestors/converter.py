"""Convert provider hour records into ``WeatherMetric`` values."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from pydantic import ValidationError

from wxcompare.errors import ConversionError
from wxcompare.models.weather import WeatherMetric

logger = logging.getLogger("wxcompare.ingestors.converter")

# Visual Crossing timeline field -> WeatherMetric attribute
_FIELD_MAP = {
    "temp": "temperature",
    "feelslike": "feels_like",
    "humidity": "humidity",
    "dew": "dew_point",
    "precip": "precipitation",
    "precipprob": "precipitation_probability",
    "snow": "snow",
    "windspeed": "wind_speed",
    "windgust": "wind_gust",
    "winddir": "wind_direction",
    "pressure": "pressure",
    "cloudcover": "cloud_cover",
    "visibility": "visibility",
    "uvindex": "uv_index",
    "conditions": "conditions",
    "icon": "icon",
}


def convert_to_weather_metric(raw_hour: Mapping[str, Any], epoch: Any) -> WeatherMetric:
    """Build a metric from one hour record, stamped with ``epoch``.

    Raises ``ConversionError`` when the record is not a mapping, the epoch is
    missing, or a field cannot be coerced to its metric type.
    """

    if not isinstance(raw_hour, Mapping):
        raise ConversionError(
            f"Hour record must be an object, got {type(raw_hour).__name__}"
        )
    if epoch is None or isinstance(epoch, bool):
        raise ConversionError("Hour record is missing datetimeEpoch")

    values: dict[str, Any] = {"timestamp": epoch}
    for source, target in _FIELD_MAP.items():
        value = raw_hour.get(source)
        if value is not None:
            values[target] = value

    try:
        return WeatherMetric(**values)
    except ValidationError as exc:
        logger.debug("Rejected hour record at %s: %s", epoch, exc)
        raise ConversionError(f"Malformed hour record at {epoch}: {exc}") from exc


__all__ = ["convert_to_weather_metric"]
