from datetime import date, datetime, timedelta, timezone

from wxcompare.models.weather import PreferredTime, TimeRange
from wxcompare.services.availability import (
    calendar_day_key,
    has_full_coverage,
    iter_calendar_days,
    preferred_window,
    required_hours,
)


def test_required_hours_for_plain_window():
    assert required_hours(PreferredTime(start_hour=6, end_hour=9)) == [6, 7, 8, 9]


def test_required_hours_for_wraparound_window():
    assert required_hours(PreferredTime(start_hour=22, end_hour=2)) == [22, 23, 0, 1, 2]


def test_has_full_coverage_detects_gaps():
    window = PreferredTime(start_hour=6, end_hour=9)

    assert has_full_coverage([5, 6, 7, 8, 9, 10], window)
    assert not has_full_coverage([6, 7, 9], window)


def test_preferred_window_spans_whole_hours():
    window = preferred_window(
        date(2024, 6, 10), PreferredTime(start_hour=6, end_hour=18), timezone.utc
    )

    assert window.start == int(datetime(2024, 6, 10, 6, tzinfo=timezone.utc).timestamp())
    assert window.end == int(
        datetime(2024, 6, 10, 18, 59, 59, tzinfo=timezone.utc).timestamp()
    )


def test_preferred_window_is_inverted_when_wrapping():
    window = preferred_window(
        date(2024, 6, 10), PreferredTime(start_hour=22, end_hour=4), timezone.utc
    )

    assert window.start > window.end


def test_iter_calendar_days_includes_both_ends():
    span = TimeRange(
        start=int(datetime(2024, 6, 10, 15, tzinfo=timezone.utc).timestamp()),
        end=int(datetime(2024, 6, 12, 1, tzinfo=timezone.utc).timestamp()),
    )

    assert list(iter_calendar_days(span, timezone.utc)) == [
        date(2024, 6, 10),
        date(2024, 6, 11),
        date(2024, 6, 12),
    ]


def test_calendar_day_key_normalizes_dates_and_datetimes():
    eastern = timezone(timedelta(hours=-5))

    assert calendar_day_key(date(2024, 6, 10)) == "2024-06-10"
    assert calendar_day_key(datetime(2024, 6, 10, 23, 59)) == "2024-06-10"
    assert (
        calendar_day_key(datetime(2024, 6, 11, 2, tzinfo=timezone.utc), eastern)
        == "2024-06-10"
    )
