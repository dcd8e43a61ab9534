"""Weekly dashboard read model and the per-day arithmetic behind the grid."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from ..catalog.model import TaskItem
from ..common.datetime_utils import day_name, hours_between, round_to_quarter_hours, span_across_midnight, start_of_week
from ..core.enums import Weekday
from ..days.model import DayEntry
from ..jobs.model import Job
from ..leave.model import LeaveEntry
from ..tasks.model import TaskEntry
from ..users.model import AppUser


def _on(entries: Iterable, day: date) -> list:
    return [e for e in entries if e.work_date == day]


def _within(entries: Iterable, start: date, end: date) -> list:
    return [e for e in entries if e.work_date is not None and start <= e.work_date < end]


def day_duration(day_entries: Sequence[DayEntry], day: date) -> float:
    span = sum((span_across_midnight(e.day_start_time, e.day_end_time) for e in _on(day_entries, day)), timedelta())
    return round_to_quarter_hours(span)


def lunch_duration(day_entries: Sequence[DayEntry], day: date) -> float:
    span = sum((span_across_midnight(e.lunch_start_time, e.lunch_end_time) for e in _on(day_entries, day)), timedelta())
    return round_to_quarter_hours(span)


def work_duration(day_entries: Sequence[DayEntry], day: date) -> float:
    return day_duration(day_entries, day) - lunch_duration(day_entries, day)


def task_duration(task_entries: Sequence[TaskEntry], leave_entries: Sequence[LeaveEntry], day: date) -> float:
    """Task hours on ``day``; paid time off counts as worked time."""
    tasks = sum(e.duration or 0.0 for e in _on(task_entries, day))
    pto = sum(e.leave_duration or 0.0 for e in _on(leave_entries, day) if e.is_paid_time_off)
    return tasks + pto


def leave_duration(leave_entries: Sequence[LeaveEntry], day: date) -> float:
    return sum(e.leave_duration or 0.0 for e in _on(leave_entries, day))


def total_hours_for_week(
    task_entries: Sequence[TaskEntry],
    leave_entries: Sequence[LeaveEntry],
    week_of: date,
) -> float:
    """Payable hours in the Sunday week containing ``week_of``: tasks plus leave other than UPTO."""
    start = start_of_week(week_of, Weekday.SUNDAY)
    end = start + timedelta(days=7)
    tasks = sum(e.duration or 0.0 for e in _within(task_entries, start, end))
    leave = sum(e.leave_duration or 0.0 for e in _within(leave_entries, start, end) if not e.is_unpaid)
    return tasks + leave


def day_entry_hours(entry: DayEntry) -> float:
    """Signed end - start when both are set, otherwise the stored work duration."""
    if entry.day_start_time is not None and entry.day_end_time is not None:
        return hours_between(entry.day_start_time, entry.day_end_time)
    return entry.work_duration or 0.0


@dataclass(frozen=True)
class WeekTotals:
    day_entry_total_hours: float
    task_entry_total_hours: float
    leave_entry_total_hours: float

    @property
    def total_hours(self) -> float:
        return self.day_entry_total_hours + self.task_entry_total_hours + self.leave_entry_total_hours


def weekly_totals(
    week_of: date,
    day_entries: Sequence[DayEntry],
    task_entries: Sequence[TaskEntry],
    leave_entries: Sequence[LeaveEntry],
) -> WeekTotals:
    end = week_of + timedelta(days=7)
    return WeekTotals(
        day_entry_total_hours=sum(day_entry_hours(e) for e in _within(day_entries, week_of, end)),
        task_entry_total_hours=sum(e.duration or 0.0 for e in _within(task_entries, week_of, end)),
        leave_entry_total_hours=sum(e.leave_duration or 0.0 for e in _within(leave_entries, week_of, end)),
    )


@dataclass(frozen=True)
class DaySummary:
    date: date
    day_name: str
    day_duration: float
    lunch_duration: float
    work_duration: float
    task_duration: float
    leave_duration: float


def summarize_days(
    week_of: date,
    day_entries: Sequence[DayEntry],
    task_entries: Sequence[TaskEntry],
    leave_entries: Sequence[LeaveEntry],
) -> List[DaySummary]:
    days = []
    for offset in range(7):
        day = week_of + timedelta(days=offset)
        days.append(
            DaySummary(
                date=day,
                day_name=day_name(day),
                day_duration=day_duration(day_entries, day),
                lunch_duration=lunch_duration(day_entries, day),
                work_duration=work_duration(day_entries, day),
                task_duration=task_duration(task_entries, leave_entries, day),
                leave_duration=leave_duration(leave_entries, day),
            )
        )
    return days


@dataclass(frozen=True)
class DashboardView:
    """Everything the weekly dashboard screen renders for one user."""

    current_user_id: Optional[int]
    is_admin: bool
    first_name: Optional[str]
    last_name: Optional[str]
    week_select: date
    is_prev_week: bool
    is_current_week: bool
    is_future_week: bool
    day_entry: Optional[DayEntry]
    day_entries: Sequence[DayEntry]
    task_entries: Sequence[TaskEntry]
    leave_entries: Sequence[LeaveEntry]
    last_task_entry: Optional[TaskEntry]
    jobs: Sequence[Job]
    tasks: Sequence[TaskItem]
    day_entry_total_hours: float
    task_entry_total_hours: float
    leave_entry_total_hours: float
    total_hours: float
    days: Sequence[DaySummary]
    week_total_hours: float
    groups: Sequence[str] = field(default_factory=list)
    users: Sequence[AppUser] = field(default_factory=list)
