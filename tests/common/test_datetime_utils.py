from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from src.timeclock.timeclock.common.datetime_utils import (
    default_week,
    hours_between,
    round_to_quarter_hours,
    span_across_midnight,
    start_of_week,
)
from src.timeclock.timeclock.core.enums import Weekday


@pytest.mark.parametrize(
    "value, start, expected",
    [
        (date(2025, 1, 8), Weekday.SUNDAY, date(2025, 1, 5)),
        (date(2025, 1, 8), Weekday.MONDAY, date(2025, 1, 6)),
        (date(2025, 1, 8), Weekday.SATURDAY, date(2025, 1, 4)),
        (date(2025, 1, 2), Weekday.SUNDAY, date(2024, 12, 29)),
        (date(2025, 1, 5), Weekday.SUNDAY, date(2025, 1, 5)),
    ],
)
def test_start_of_week_fixed_cases(value, start, expected):
    assert start_of_week(value, start) == expected


def test_start_of_week_strips_time_of_day():
    assert start_of_week(datetime(2025, 1, 8, 17, 45), Weekday.SUNDAY) == date(2025, 1, 5)


def test_start_of_week_is_idempotent_and_never_later():
    day = date(2024, 2, 20)
    for offset in range(60):
        d = day + timedelta(days=offset)
        for start in Weekday:
            ws = start_of_week(d, start)
            assert start_of_week(ws, start) == ws
            assert ws <= d
            assert (d - ws).days < 7
            assert Weekday.of(ws) == start


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2025, 1, 6), date(2024, 12, 29)),  # Monday -> previous week
        (date(2025, 1, 7), date(2024, 12, 29)),  # Tuesday -> previous week
        (date(2025, 1, 8), date(2025, 1, 5)),  # Wednesday -> this week
        (date(2025, 1, 5), date(2025, 1, 5)),  # Sunday -> this week
        (date(2025, 1, 11), date(2025, 1, 5)),  # Saturday -> this week
    ],
)
def test_default_week_grace_period(today, expected):
    assert default_week(today) == expected


def test_hours_between_is_signed():
    assert hours_between(time(8, 0), time(17, 0)) == 9.0
    assert hours_between(time(22, 0), time(6, 0)) == -16.0


def test_span_across_midnight_wraps_and_treats_missing_as_zero():
    assert span_across_midnight(time(22, 0), time(6, 0)) == timedelta(hours=8)
    assert span_across_midnight(None, None) == timedelta(0)
    assert span_across_midnight(time(8, 0), None) == timedelta(hours=16)


def test_round_to_quarter_hours():
    assert round_to_quarter_hours(timedelta(hours=8, minutes=7)) == 8.0
    assert round_to_quarter_hours(timedelta(hours=8, minutes=8)) == 8.25
    assert round_to_quarter_hours(timedelta(hours=7, minutes=52)) == 7.75
