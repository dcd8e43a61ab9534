from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DayEntry


class DayEntryRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[DayEntry]:
        raise NotImplementedError

    def list_for_user_week(self, user_id: int, week_of: date) -> Sequence[DayEntry]:
        raise NotImplementedError

    def create(self, entry: DayEntry) -> int:
        raise NotImplementedError

    def update(self, entry: DayEntry) -> bool:
        """Overwrite every mutable column of the row with ``entry.id``."""

        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError

    def delete_for_user_and_date(self, user_id: int, work_date: date) -> int:
        raise NotImplementedError
