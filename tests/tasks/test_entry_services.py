from __future__ import annotations

from datetime import date

import pytest

from src.timeclock.timeclock.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.timeclock.timeclock.leave.model import LeaveEntry
from src.timeclock.timeclock.leave.service import LeaveService
from src.timeclock.timeclock.tasks.model import TaskEntry
from src.timeclock.timeclock.tasks.service import TaskEntryService

from tests.fakes import InMemoryLeave, InMemoryTasks


def test_task_entry_is_required(employee):
    with pytest.raises(ValidationError, match="TaskEntry is required."):
        TaskEntryService(InMemoryTasks()).save(employee, None)


def test_new_task_entry_is_inserted_with_week_bucket(employee, today):
    tasks = InMemoryTasks()
    saved = TaskEntryService(tasks).save(
        employee,
        TaskEntry(id=0, user_id=None, week_of=None, work_date=date(2025, 1, 7), job_id=1, duration=4.0),
        today=today,
    )
    stored = tasks.get_by_id(saved.id)
    assert stored.user_id == 2
    assert stored.week_of == date(2025, 1, 5)
    assert stored.day_name == "Tuesday"


def test_existing_task_entry_is_overwritten(employee, today):
    tasks = InMemoryTasks(TaskEntry(id=4, user_id=2, week_of=date(2025, 1, 5), work_date=today, duration=2.0))
    TaskEntryService(tasks).save(
        employee,
        TaskEntry(id=4, user_id=2, week_of=None, work_date=today, duration=3.5, comment="revised"),
        today=today,
    )
    assert tasks.get_by_id(4).duration == 3.5
    assert tasks.get_by_id(4).comment == "revised"
    assert len(tasks.rows) == 1


def test_update_of_missing_task_entry_is_not_found(employee, today):
    with pytest.raises(NotFoundError, match="Task entry not found."):
        TaskEntryService(InMemoryTasks()).save(
            employee, TaskEntry(id=9, user_id=None, week_of=None, work_date=today), today=today
        )


def test_employee_cannot_delete_other_users_task(employee, today):
    tasks = InMemoryTasks(TaskEntry(id=1, user_id=3, week_of=date(2025, 1, 5), work_date=today))
    with pytest.raises(AuthorizationError):
        TaskEntryService(tasks).delete(employee, 1)
    assert tasks.get_by_id(1) is not None


def test_delete_task_entry(admin, today):
    tasks = InMemoryTasks(TaskEntry(id=1, user_id=3, week_of=date(2025, 1, 5), work_date=today))
    TaskEntryService(tasks).delete(admin, 1)
    assert tasks.rows == {}


def test_leave_entry_is_required(employee):
    with pytest.raises(ValidationError, match="LeaveEntry is required."):
        LeaveService(InMemoryLeave()).save(employee, None)


def test_leave_insert_then_update(employee, today):
    leave = InMemoryLeave()
    service = LeaveService(leave)
    saved = service.save(
        employee,
        LeaveEntry(id=0, user_id=None, week_of=None, work_date=today, leave_type="PTO", leave_duration=8.0),
        today=today,
    )
    service.save(employee, LeaveEntry(id=saved.id, user_id=2, week_of=None, work_date=today, leave_type="Sick", leave_duration=4.0))

    stored = leave.get_by_id(saved.id)
    assert stored.leave_type == "Sick"
    assert stored.leave_duration == 4.0
    assert stored.week_of == date(2025, 1, 5)


def test_delete_missing_leave_is_not_found(employee):
    with pytest.raises(NotFoundError, match="Leave entry not found."):
        LeaveService(InMemoryLeave()).delete(employee, 1)
