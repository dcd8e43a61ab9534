from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import LeaveEntry


class LeaveEntryRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[LeaveEntry]:
        raise NotImplementedError

    def list_for_user_week(self, user_id: int, week_of: date) -> Sequence[LeaveEntry]:
        raise NotImplementedError

    def list_for_user_range(self, user_id: int, start: date, end: date) -> Sequence[LeaveEntry]:
        raise NotImplementedError

    def create(self, entry: LeaveEntry) -> int:
        raise NotImplementedError

    def update(self, entry: LeaveEntry) -> bool:
        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError
