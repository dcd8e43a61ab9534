from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import TaskEntry, TimesheetLine


class TaskEntryRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[TaskEntry]:
        raise NotImplementedError

    def list_for_user_week(self, user_id: int, week_of: date) -> Sequence[TaskEntry]:
        raise NotImplementedError

    def get_last_for_user(self, user_id: int) -> Optional[TaskEntry]:
        """Most recently dated task entry of the user, any week."""

        raise NotImplementedError

    def list_for_user_range(self, user_id: int, start: date, end: date) -> Sequence[TaskEntry]:
        """Entries dated ``start`` through ``end`` inclusive, oldest first."""

        raise NotImplementedError

    def list_by_group_and_range(
        self,
        group: str,
        from_date: Optional[date],
        to_date: Optional[date],
    ) -> Sequence[TimesheetLine]:
        """Task entries of every user in ``group``, by date then last name.

        ``to_date`` is inclusive of the whole day.
        """

        raise NotImplementedError

    def create(self, entry: TaskEntry) -> int:
        raise NotImplementedError

    def update(self, entry: TaskEntry) -> bool:
        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError

    def exists_for_job(self, job_id: int) -> bool:
        raise NotImplementedError
