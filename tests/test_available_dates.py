from datetime import date, datetime, timedelta, timezone

import pytest

from wxcompare.models.weather import PreferredTime
from wxcompare.services.weather_store import WeatherStore

HOUR = 3600
DAY = 24 * HOUR
D0 = date(2024, 6, 10)
D0_EPOCH = int(datetime(2024, 6, 10, tzinfo=timezone.utc).timestamp())
DAYTIME = PreferredTime(start_hour=6, end_hour=18)


def _hourly_payload(epochs: list[int]):
    """Group epochs into provider day records (grouping does not matter)."""

    days: dict[int, list[dict]] = {}
    for epoch in epochs:
        days.setdefault(epoch // DAY, []).append({"datetimeEpoch": epoch, "temp": 81.0})
    return {
        "days": [{"hours": hours} for _, hours in sorted(days.items())],
        "resolvedAddress": "Lake Charles, LA 70601",
        "timezone": "America/Chicago",
    }


def _full_days(start_epoch: int, num_days: int) -> list[int]:
    return [start_epoch + h * HOUR for h in range(num_days * 24)]


@pytest.fixture
def store():
    return WeatherStore(tz=timezone.utc, buffer_hours=2)


def test_every_day_with_full_coverage_is_available(store):
    store.set_weather_data("70601", _hourly_payload(_full_days(D0_EPOCH, 3)))

    assert store.get_available_dates("70601", DAYTIME) == [
        D0,
        D0 + timedelta(days=1),
        D0 + timedelta(days=2),
    ]


def test_missing_hour_excludes_that_day(store):
    hour_18_day_1 = D0_EPOCH + DAY + 18 * HOUR
    epochs = [e for e in _full_days(D0_EPOCH, 3) if e != hour_18_day_1]
    store.set_weather_data("70601", _hourly_payload(epochs))

    assert store.get_available_dates("70601", DAYTIME) == [D0, D0 + timedelta(days=2)]


def test_partial_first_day_is_excluded(store):
    epochs = [e for e in _full_days(D0_EPOCH, 2) if e >= D0_EPOCH + 12 * HOUR]
    store.set_weather_data("70601", _hourly_payload(epochs))

    assert store.get_available_dates("70601", DAYTIME) == [D0 + timedelta(days=1)]


def test_only_window_hours_are_required(store):
    epochs = [
        D0_EPOCH + d * DAY + h * HOUR
        for d in range(2)
        for h in range(DAYTIME.start_hour, DAYTIME.end_hour + 1)
    ]
    store.set_weather_data("70601", _hourly_payload(epochs))

    assert store.get_available_dates("70601", DAYTIME) == [D0, D0 + timedelta(days=1)]


def test_single_hour_window(store):
    epochs = [D0_EPOCH + 9 * HOUR, D0_EPOCH + DAY + 10 * HOUR]
    store.set_weather_data("70601", _hourly_payload(epochs))

    assert store.get_available_dates(
        "70601", PreferredTime(start_hour=9, end_hour=9)
    ) == [D0]


def test_days_are_local_to_store_timezone():
    central = timezone(timedelta(hours=-5))
    store = WeatherStore(tz=central, buffer_hours=0)
    local_midnight = int(datetime(2024, 6, 10, tzinfo=central).timestamp())
    store.set_weather_data("70601", _hourly_payload(_full_days(local_midnight, 2)))

    assert store.get_available_dates("70601", PreferredTime(start_hour=0, end_hour=23)) == [
        D0,
        D0 + timedelta(days=1),
    ]


def test_wraparound_window_is_never_satisfied_within_one_day(store):
    # The window stays anchored to a single calendar day, so 22:00 to 04:59
    # becomes an inverted range that selects nothing even with full data.
    store.set_weather_data("70601", _hourly_payload(_full_days(D0_EPOCH, 3)))

    assert store.get_available_dates(
        "70601", PreferredTime(start_hour=22, end_hour=4)
    ) == []


def test_wraparound_window_matches_once_buffer_spans_the_gap(store):
    store.set_buffer_hours(24)
    store.set_weather_data("70601", _hourly_payload(_full_days(D0_EPOCH, 3)))

    assert len(
        store.get_available_dates("70601", PreferredTime(start_hour=22, end_hour=4))
    ) == 3


def test_missing_location_yields_no_dates(store):
    assert store.get_available_dates(None, DAYTIME) == []
    assert store.get_available_dates("70601", DAYTIME) == []

    store.set_weather_data("70601", {"days": [{"datetime": "2024-06-10"}]})
    assert store.get_available_dates("70601", DAYTIME) == []
