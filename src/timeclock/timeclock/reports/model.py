from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Union

from ..leave.model import LeaveEntry
from ..tasks.model import TaskEntry
from ..users.model import AppUser


@dataclass(frozen=True)
class TaskReportEntry:
    entry: TaskEntry

    @property
    def date(self) -> Optional[date]:
        return self.entry.work_date

    @property
    def hours(self) -> float:
        return self.entry.duration or 0.0


@dataclass(frozen=True)
class LeaveReportEntry:
    entry: LeaveEntry

    @property
    def date(self) -> Optional[date]:
        return self.entry.work_date

    @property
    def hours(self) -> float:
        return self.entry.leave_duration or 0.0


ReportEntry = Union[TaskReportEntry, LeaveReportEntry]


@dataclass(frozen=True)
class EmployeeReport:
    """One employee's task and leave entries for the workbook, date ordered."""

    user: AppUser
    entries: Sequence[ReportEntry]

    @property
    def total_hours(self) -> float:
        """Task hours plus leave hours, except unpaid leave."""
        total = 0.0
        for item in self.entries:
            if isinstance(item, LeaveReportEntry) and item.entry.is_unpaid:
                continue
            total += item.hours
        return total


def merge_entries(tasks: Sequence[TaskEntry], leave: Sequence[LeaveEntry]) -> list:
    """Interleave task and leave entries by date; tasks come first on a tie."""
    merged: list = [TaskReportEntry(t) for t in tasks] + [LeaveReportEntry(e) for e in leave]
    merged.sort(key=lambda item: item.date or date.min)
    return merged
