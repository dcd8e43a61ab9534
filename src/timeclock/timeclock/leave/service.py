from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.entries import stamp_entry
from ..core.enums import Weekday
from ..core.exceptions import NotFoundError, ValidationError
from ..users.model import CallerIdentity
from ..users.service import ensure_can_edit
from .model import LeaveEntry
from .repository import LeaveEntryRepository

LEAVE_ENTRY_REQUIRED = "LeaveEntry is required."
LEAVE_ENTRY_NOT_FOUND = "Leave entry not found."


class LeaveService:
    def __init__(self, leave: LeaveEntryRepository, *, week_start: Weekday = Weekday.SUNDAY):
        self._leave = leave
        self._week_start = week_start

    def save(self, caller: CallerIdentity, entry: Optional[LeaveEntry], *, today: Optional[date] = None) -> LeaveEntry:
        if entry is None:
            raise ValidationError(LEAVE_ENTRY_REQUIRED)

        entry = stamp_entry(entry, user_id=caller.user_id, week_start=self._week_start, today=today)
        ensure_can_edit(caller, entry.user_id)

        if entry.id > 0:
            existing = self._leave.get_by_id(entry.id)
            if existing is None:
                raise NotFoundError(LEAVE_ENTRY_NOT_FOUND)
            ensure_can_edit(caller, existing.user_id)
            self._leave.update(entry)
            return entry

        return replace(entry, id=self._leave.create(entry))

    def delete(self, caller: CallerIdentity, entry_id: int) -> None:
        existing = self._leave.get_by_id(entry_id)
        if existing is None:
            raise NotFoundError(LEAVE_ENTRY_NOT_FOUND)
        ensure_can_edit(caller, existing.user_id)
        self._leave.delete(existing.id)
