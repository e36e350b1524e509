import pytest
from pydantic import ValidationError

from wxcompare.errors import ConversionError
from wxcompare.ingestors.converter import convert_to_weather_metric


def test_converter_maps_provider_fields():
    raw_hour = {
        "datetime": "14:00:00",
        "datetimeEpoch": 1718028000,
        "temp": 88.4,
        "feelslike": 97.1,
        "humidity": 71.5,
        "dew": 77.0,
        "precip": 0.02,
        "precipprob": 35,
        "windspeed": 9.2,
        "windgust": 18.3,
        "winddir": 190,
        "pressure": 1014.2,
        "cloudcover": 48.0,
        "visibility": 9.9,
        "uvindex": 8,
        "conditions": "Partially cloudy",
        "icon": "partly-cloudy-day",
        "source": "obs",
    }

    metric = convert_to_weather_metric(raw_hour, raw_hour["datetimeEpoch"])

    assert metric.timestamp == 1718028000
    assert metric.temperature == 88.4
    assert metric.feels_like == 97.1
    assert metric.humidity == 71.5
    assert metric.dew_point == 77.0
    assert metric.precipitation == 0.02
    assert metric.precipitation_probability == 35
    assert metric.wind_speed == 9.2
    assert metric.wind_gust == 18.3
    assert metric.wind_direction == 190
    assert metric.pressure == 1014.2
    assert metric.cloud_cover == 48.0
    assert metric.uv_index == 8
    assert metric.conditions == "Partially cloudy"
    assert metric.icon == "partly-cloudy-day"


def test_converter_leaves_missing_fields_empty():
    metric = convert_to_weather_metric({"temp": 30.0}, 1718028000)

    assert metric.temperature == 30.0
    assert metric.snow is None
    assert metric.wind_gust is None


def test_converter_requires_epoch():
    with pytest.raises(ConversionError):
        convert_to_weather_metric({"temp": 30.0}, None)


def test_converter_rejects_malformed_fields():
    with pytest.raises(ConversionError) as exc_info:
        convert_to_weather_metric({"temp": "hot"}, 1718028000)

    assert "1718028000" in str(exc_info.value)


def test_converter_rejects_non_mapping_records():
    with pytest.raises(ConversionError):
        convert_to_weather_metric(["not", "a", "record"], 1718028000)


def test_metrics_are_immutable():
    metric = convert_to_weather_metric({"temp": 30.0}, 1718028000)

    with pytest.raises(ValidationError):
        metric.temperature = 31.0
