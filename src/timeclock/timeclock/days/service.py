from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import hours_between
from ..common.entries import stamp_entry
from ..core.enums import Weekday
from ..core.exceptions import NotFoundError, ValidationError
from ..users.model import CallerIdentity
from ..users.service import ensure_can_edit
from .model import DayEntry
from .repository import DayEntryRepository

logger = logging.getLogger(__name__)

DAY_ENTRY_REQUIRED = "DayEntry is required."
DAY_ENTRY_NOT_FOUND = "Day entry not found."


def compute_durations(entry: DayEntry) -> DayEntry:
    """Fill day/lunch/work durations from the times on the entry.

    Only runs when both day start and day end are present. A day end earlier
    than the start is not treated as an overnight shift: the duration comes
    out negative.
    """
    if entry.day_start_time is None or entry.day_end_time is None:
        return entry

    day_hours = hours_between(entry.day_start_time, entry.day_end_time)
    lunch_hours = 0.0
    lunch_duration = entry.lunch_duration
    if entry.lunch_start_time is not None and entry.lunch_end_time is not None:
        lunch_hours = hours_between(entry.lunch_start_time, entry.lunch_end_time)
        lunch_duration = lunch_hours

    return replace(
        entry,
        day_duration=day_hours,
        lunch_duration=lunch_duration,
        work_duration=day_hours - lunch_hours,
    )


class ClockService:
    """Use case: clock in, clock out and edit day entries."""

    def __init__(self, days: DayEntryRepository, *, week_start: Weekday = Weekday.SUNDAY):
        self._days = days
        self._week_start = week_start

    def normalize(self, caller: CallerIdentity, entry: DayEntry, *, today: Optional[date] = None) -> DayEntry:
        return stamp_entry(entry, user_id=caller.user_id, week_start=self._week_start, today=today)

    def clock_in_out(
        self,
        caller: CallerIdentity,
        entry: Optional[DayEntry],
        *,
        today: Optional[date] = None,
    ) -> DayEntry:
        if entry is None:
            raise ValidationError(DAY_ENTRY_REQUIRED)

        entry = compute_durations(self.normalize(caller, entry, today=today))
        ensure_can_edit(caller, entry.user_id)

        if entry.id > 0:
            existing = self._days.get_by_id(entry.id)
            if existing is None:
                raise NotFoundError(DAY_ENTRY_NOT_FOUND)
            ensure_can_edit(caller, existing.user_id)
            self._days.update(entry)
            logger.info("Updated day entry %s for user %s on %s", entry.id, entry.user_id, entry.work_date)
            return entry

        new_id = self._days.create(entry)
        logger.info("Clocked in user %s on %s (day entry %s)", entry.user_id, entry.work_date, new_id)
        return replace(entry, id=new_id)

    def delete(self, caller: CallerIdentity, entry_id: int) -> None:
        existing = self._days.get_by_id(entry_id)
        if existing is None:
            raise NotFoundError(DAY_ENTRY_NOT_FOUND)
        ensure_can_edit(caller, existing.user_id)
        self._days.delete(existing.id)
        logger.info("Deleted day entry %s", entry_id)

    def delete_for_date(self, caller: CallerIdentity, work_date: date, user_id: Optional[int] = None) -> int:
        user_id = user_id or caller.user_id
        ensure_can_edit(caller, user_id)
        removed = self._days.delete_for_user_and_date(user_id, work_date)
        if removed == 0:
            raise NotFoundError(DAY_ENTRY_NOT_FOUND)
        logger.info("Deleted %s day entries for user %s on %s", removed, user_id, work_date)
        return removed
