from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from torqr.domain.scheduling import (
    UPCOMING_WINDOW_DAYS,
    calculate_next_maintenance,
    reschedule_heater,
    to_naive_utc,
    upcoming_window,
    utcnow,
)


@pytest.mark.parametrize(
    "reference, months, expected",
    [
        (datetime(2024, 1, 15, 10, 0), 12, datetime(2025, 1, 15, 10, 0)),
        (datetime(2024, 1, 15, 10, 0), 6, datetime(2024, 7, 15, 10, 0)),
        (datetime(2024, 11, 20, 8, 30), 3, datetime(2025, 2, 20, 8, 30)),
        (datetime(2024, 3, 1), 24, datetime(2026, 3, 1)),
    ],
)
def test_adds_calendar_months(reference, months, expected):
    assert calculate_next_maintenance(reference, months) == expected


def test_month_end_clamps_to_last_day():
    assert calculate_next_maintenance(datetime(2023, 1, 31), 1) == datetime(2023, 2, 28)
    assert calculate_next_maintenance(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)
    assert calculate_next_maintenance(datetime(2024, 8, 31), 1) == datetime(2024, 9, 30)


def test_leap_day_plus_twelve_months():
    assert calculate_next_maintenance(datetime(2024, 2, 29, 9, 0), 12) == datetime(2025, 2, 28, 9, 0)


def test_time_of_day_is_kept():
    result = calculate_next_maintenance(datetime(2024, 5, 10, 17, 45, 12), 1)
    assert (result.hour, result.minute, result.second) == (17, 45, 12)


def test_aware_reference_is_normalized_to_utc():
    reference = datetime(2024, 1, 15, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    result = calculate_next_maintenance(reference, 1)
    assert result.tzinfo is None
    assert result == datetime(2024, 2, 15, 10, 0)


def test_to_naive_utc():
    assert to_naive_utc(None) is None
    naive = datetime(2024, 1, 1, 12, 0)
    assert to_naive_utc(naive) is naive
    assert to_naive_utc(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)) == naive


def test_utcnow_is_naive():
    now = utcnow()
    assert now.tzinfo is None
    assert abs(datetime.now(timezone.utc).replace(tzinfo=None) - now) < timedelta(seconds=5)


def test_reschedule_uses_last_maintenance():
    heater = SimpleNamespace(
        last_maintenance=datetime(2024, 1, 15, 10, 0), maintenance_interval=6, next_maintenance=None
    )
    assert reschedule_heater(heater) == datetime(2024, 7, 15, 10, 0)
    assert heater.next_maintenance == datetime(2024, 7, 15, 10, 0)


def test_reschedule_without_last_maintenance_uses_now():
    now = datetime(2024, 6, 1, 9, 0)
    heater = SimpleNamespace(last_maintenance=None, maintenance_interval=3, next_maintenance=None)
    assert reschedule_heater(heater, now=now) == datetime(2024, 9, 1, 9, 0)


def test_upcoming_window_spans_thirty_days():
    now = datetime(2024, 6, 1, 12, 0)
    start, end = upcoming_window(now)
    assert start == now
    assert end - start == timedelta(days=UPCOMING_WINDOW_DAYS) == timedelta(days=30)
