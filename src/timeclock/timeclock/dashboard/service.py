from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from ..catalog.service import TaskCatalogService
from ..common.datetime_utils import default_week, start_of_week, today_local
from ..core.enums import Weekday
from ..core.exceptions import AuthorizationError
from ..days.repository import DayEntryRepository
from ..jobs.service import JobService
from ..leave.repository import LeaveEntryRepository
from ..tasks.repository import TaskEntryRepository
from ..users.model import CallerIdentity
from ..users.service import UserService
from .view import DashboardView, summarize_days, total_hours_for_week, weekly_totals

logger = logging.getLogger(__name__)


class DashboardService:
    """Builds the weekly dashboard for a user."""

    def __init__(
        self,
        users: UserService,
        days: DayEntryRepository,
        tasks: TaskEntryRepository,
        leave: LeaveEntryRepository,
        jobs: JobService,
        catalog: TaskCatalogService,
        *,
        week_start: Weekday = Weekday.SUNDAY,
        sync_staged_jobs: bool = True,
    ):
        self._users = users
        self._days = days
        self._tasks = tasks
        self._leave = leave
        self._jobs = jobs
        self._catalog = catalog
        self._week_start = week_start
        self._sync_staged_jobs = sync_staged_jobs

    def resolve_week(self, week_select: Optional[date], today: date) -> date:
        if week_select is not None:
            return start_of_week(week_select, self._week_start)
        return default_week(today, self._week_start)

    def build(
        self,
        caller: CallerIdentity,
        *,
        user_id: Optional[int] = None,
        week_select: Optional[date] = None,
        today: Optional[date] = None,
    ) -> DashboardView:
        today = today or today_local()
        user_id = user_id or caller.user_id
        if not caller.can_edit(user_id):
            raise AuthorizationError("You can only view your own dashboard.")

        week_of = self.resolve_week(week_select, today)
        current_week = start_of_week(today, self._week_start)
        logger.debug("Dashboard for user %s, week of %s", user_id, week_of)

        if self._sync_staged_jobs:
            self._jobs.sync_staged_jobs()

        user = self._users.get(user_id)
        day_entries = list(self._days.list_for_user_week(user_id, week_of))
        task_entries = list(self._tasks.list_for_user_week(user_id, week_of))
        leave_entries = list(self._leave.list_for_user_week(user_id, week_of))
        totals = weekly_totals(week_of, day_entries, task_entries, leave_entries)

        open_today = [e for e in day_entries if e.work_date == today and e.is_open]

        groups = []
        users = []
        if caller.is_admin:
            groups = self._users.list_groups()
            users = list(self._users.list_users(caller))

        return DashboardView(
            current_user_id=user_id,
            is_admin=caller.is_admin,
            first_name=user.first_name if user else None,
            last_name=user.last_name if user else None,
            week_select=week_of,
            is_prev_week=week_of < current_week,
            is_current_week=current_week <= week_of < current_week + timedelta(days=7),
            is_future_week=week_of >= current_week + timedelta(days=7),
            day_entry=open_today[-1] if open_today else None,
            day_entries=day_entries,
            task_entries=task_entries,
            leave_entries=leave_entries,
            last_task_entry=self._tasks.get_last_for_user(user_id),
            jobs=list(self._jobs.list_all()),
            tasks=list(self._catalog.list_all()),
            day_entry_total_hours=totals.day_entry_total_hours,
            task_entry_total_hours=totals.task_entry_total_hours,
            leave_entry_total_hours=totals.leave_entry_total_hours,
            total_hours=totals.total_hours,
            days=summarize_days(week_of, day_entries, task_entries, leave_entries),
            week_total_hours=total_hours_for_week(task_entries, leave_entries, week_of),
            groups=groups,
            users=users,
        )
