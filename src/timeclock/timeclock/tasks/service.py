from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.entries import stamp_entry
from ..core.enums import Weekday
from ..core.exceptions import NotFoundError, ValidationError
from ..users.model import CallerIdentity
from ..users.service import ensure_can_edit
from .model import TaskEntry
from .repository import TaskEntryRepository

logger = logging.getLogger(__name__)

TASK_ENTRY_REQUIRED = "TaskEntry is required."
TASK_ENTRY_NOT_FOUND = "Task entry not found."


class TaskEntryService:
    def __init__(self, tasks: TaskEntryRepository, *, week_start: Weekday = Weekday.SUNDAY):
        self._tasks = tasks
        self._week_start = week_start

    def save(self, caller: CallerIdentity, entry: Optional[TaskEntry], *, today: Optional[date] = None) -> TaskEntry:
        """Insert when ``entry.id`` is 0, otherwise overwrite the stored row."""
        if entry is None:
            raise ValidationError(TASK_ENTRY_REQUIRED)

        entry = stamp_entry(entry, user_id=caller.user_id, week_start=self._week_start, today=today)
        ensure_can_edit(caller, entry.user_id)

        if entry.id > 0:
            existing = self._tasks.get_by_id(entry.id)
            if existing is None:
                raise NotFoundError(TASK_ENTRY_NOT_FOUND)
            ensure_can_edit(caller, existing.user_id)
            self._tasks.update(entry)
            return entry

        new_id = self._tasks.create(entry)
        logger.debug("Created task entry %s for user %s", new_id, entry.user_id)
        return replace(entry, id=new_id)

    def delete(self, caller: CallerIdentity, entry_id: int) -> None:
        existing = self._tasks.get_by_id(entry_id)
        if existing is None:
            raise NotFoundError(TASK_ENTRY_NOT_FOUND)
        ensure_can_edit(caller, existing.user_id)
        self._tasks.delete(existing.id)
