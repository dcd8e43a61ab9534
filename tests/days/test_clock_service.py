from __future__ import annotations

from datetime import date, time

import pytest

from src.timeclock.timeclock.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.timeclock.timeclock.days.model import DayEntry
from src.timeclock.timeclock.days.service import ClockService, compute_durations

from tests.fakes import InMemoryDays


def _entry(**kwargs) -> DayEntry:
    values = dict(id=0, user_id=None, week_of=None, work_date=None)
    values.update(kwargs)
    return DayEntry(**values)


def test_full_day_durations():
    entry = compute_durations(
        _entry(
            day_start_time=time(8, 0),
            day_end_time=time(17, 0),
            lunch_start_time=time(12, 0),
            lunch_end_time=time(13, 0),
        )
    )
    assert entry.day_duration == 9.0
    assert entry.lunch_duration == 1.0
    assert entry.work_duration == 8.0


def test_work_equals_day_without_lunch():
    entry = compute_durations(_entry(day_start_time=time(7, 30), day_end_time=time(16, 0)))
    assert entry.day_duration == 8.5
    assert entry.work_duration == 8.5


def test_open_shift_has_no_durations():
    entry = compute_durations(_entry(day_start_time=time(8, 0)))
    assert entry.day_duration is None
    assert entry.work_duration is None


def test_overnight_clock_out_is_not_wrapped():
    entry = compute_durations(_entry(day_start_time=time(22, 0), day_end_time=time(6, 0)))
    assert entry.day_duration == -16.0


def test_missing_entry_is_rejected(employee):
    with pytest.raises(ValidationError, match="DayEntry is required."):
        ClockService(InMemoryDays()).clock_in_out(employee, None)


def test_clock_in_inserts_and_normalises(employee, today):
    days = InMemoryDays()
    saved = ClockService(days).clock_in_out(employee, _entry(day_start_time=time(8, 0)), today=today)

    assert saved.id == 1
    stored = days.get_by_id(1)
    assert stored.user_id == employee.user_id
    assert stored.work_date == today
    assert stored.day_name == "Thursday"
    assert stored.week_of == date(2025, 1, 5)
    assert stored.is_open


def test_supplied_week_is_snapped_to_week_start(employee, today):
    days = InMemoryDays()
    ClockService(days).clock_in_out(
        employee,
        _entry(work_date=date(2025, 1, 8), week_of=date(2025, 1, 7), day_start_time=time(8, 0)),
        today=today,
    )
    assert days.get_by_id(1).week_of == date(2025, 1, 5)


def test_zero_id_always_inserts(employee, today):
    days = InMemoryDays()
    service = ClockService(days)
    service.clock_in_out(employee, _entry(day_start_time=time(8, 0)), today=today)
    service.clock_in_out(employee, _entry(day_start_time=time(8, 0)), today=today)
    assert len(days.rows) == 2


def test_clock_out_updates_in_place(employee, today):
    days = InMemoryDays(
        DayEntry(id=7, user_id=2, week_of=date(2025, 1, 5), work_date=today, day_start_time=time(8, 0))
    )
    ClockService(days).clock_in_out(
        employee,
        _entry(id=7, work_date=today, day_start_time=time(8, 0), day_end_time=time(16, 30)),
        today=today,
    )

    assert len(days.rows) == 1
    stored = days.get_by_id(7)
    assert stored.day_end_time == time(16, 30)
    assert stored.work_duration == 8.5
    assert not stored.is_open


def test_update_of_missing_entry_is_not_found(employee, today):
    with pytest.raises(NotFoundError, match="Day entry not found."):
        ClockService(InMemoryDays()).clock_in_out(employee, _entry(id=99), today=today)


def test_employee_cannot_clock_for_someone_else(employee, today):
    with pytest.raises(AuthorizationError):
        ClockService(InMemoryDays()).clock_in_out(employee, _entry(user_id=3), today=today)


def test_admin_can_clock_for_someone_else(admin, today):
    days = InMemoryDays()
    ClockService(days).clock_in_out(admin, _entry(user_id=3, day_start_time=time(8, 0)), today=today)
    assert days.get_by_id(1).user_id == 3


def test_delete_by_date_removes_all_rows_of_that_day(employee, today):
    days = InMemoryDays(
        DayEntry(id=1, user_id=2, week_of=date(2025, 1, 5), work_date=today),
        DayEntry(id=2, user_id=2, week_of=date(2025, 1, 5), work_date=today),
        DayEntry(id=3, user_id=3, week_of=date(2025, 1, 5), work_date=today),
    )
    assert ClockService(days).delete_for_date(employee, today) == 2
    assert list(days.rows) == [3]


def test_delete_missing_day_is_not_found(employee):
    with pytest.raises(NotFoundError):
        ClockService(InMemoryDays()).delete(employee, 5)
