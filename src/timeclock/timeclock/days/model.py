from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class DayEntry:
    """Domain entity: one user's clock-in/out record for a calendar date.

    An entry with a start time and no end time is an open shift.
    """

    id: int
    user_id: Optional[int]
    week_of: Optional[date]
    work_date: Optional[date]
    day_name: Optional[str] = None
    day_start_time: Optional[time] = None
    day_end_time: Optional[time] = None
    lunch_start_time: Optional[time] = None
    lunch_end_time: Optional[time] = None
    day_duration: Optional[float] = None
    lunch_duration: Optional[float] = None
    work_duration: Optional[float] = None
    comment: Optional[str] = None
    status: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.day_start_time is not None and self.day_end_time is None
