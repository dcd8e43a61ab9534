from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.constants import PAID_TIME_OFF, UNPAID_TIME_OFF


@dataclass(frozen=True)
class LeaveEntry:
    """Leave taken on one date. ``leave_type`` is free text (PTO, Sick, UPTO...)."""

    id: int
    user_id: Optional[int]
    week_of: Optional[date]
    work_date: Optional[date]
    day_name: Optional[str] = None
    leave_type: Optional[str] = None
    leave_duration: Optional[float] = None
    status: Optional[str] = None

    @property
    def is_paid_time_off(self) -> bool:
        return self.leave_type == PAID_TIME_OFF

    @property
    def is_unpaid(self) -> bool:
        return self.leave_type == UNPAID_TIME_OFF
