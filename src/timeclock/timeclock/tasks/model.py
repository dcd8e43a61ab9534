from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from ..jobs.model import Job


@dataclass(frozen=True)
class TaskEntry:
    """Hours logged against a job and task label on one date."""

    id: int
    user_id: Optional[int]
    week_of: Optional[date]
    work_date: Optional[date]
    day_name: Optional[str] = None
    job_id: Optional[int] = None
    task_name: Optional[str] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    duration: Optional[float] = None
    comment: Optional[str] = None
    status: Optional[str] = None
    job: Optional[Job] = field(default=None, compare=False)


@dataclass(frozen=True)
class TimesheetLine:
    """A task entry together with the employee columns of the timesheet export."""

    first_name: Optional[str]
    last_name: Optional[str]
    email: Optional[str]
    group: Optional[str]
    entry: TaskEntry

    @property
    def employee(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
