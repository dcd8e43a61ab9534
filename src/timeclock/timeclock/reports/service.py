from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence, Tuple

from ..core.exceptions import ValidationError
from ..jobs.model import JobDetail
from ..jobs.service import JobService
from ..leave.repository import LeaveEntryRepository
from ..tasks.repository import TaskEntryRepository
from ..users.repository import UserRepository
from .csv_export import render_timesheet, timesheet_filename
from .model import EmployeeReport, merge_entries
from .workbook import build_job_details_workbook, build_time_workbook

logger = logging.getLogger(__name__)

GROUP_REQUIRED = "Group is required."


class ReportService:
    """Read-only exports for admins: CSV timesheets and spreadsheets."""

    def __init__(
        self,
        users: UserRepository,
        tasks: TaskEntryRepository,
        leave: LeaveEntryRepository,
        jobs: JobService,
    ):
        self._users = users
        self._tasks = tasks
        self._leave = leave
        self._jobs = jobs

    def export_timesheet(
        self,
        group: Optional[str],
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Tuple[str, str]:
        """Return (filename, csv text) for the group's task entries."""
        if not group or not group.strip():
            raise ValidationError(GROUP_REQUIRED)

        lines = self._tasks.list_by_group_and_range(group, from_date, to_date)
        now = now or datetime.now(timezone.utc)
        logger.info("Timesheet export for group %s (%s rows)", group, len(lines))
        return timesheet_filename(group, now), render_timesheet(lines)

    def employee_reports(self, group: str, start: date, end: date) -> List[EmployeeReport]:
        reports = []
        for user in self._users.list_by_group(group):
            tasks = self._tasks.list_for_user_range(user.user_id, start, end)
            leave = self._leave.list_for_user_range(user.user_id, start, end)
            reports.append(EmployeeReport(user=user, entries=merge_entries(tasks, leave)))
        return reports

    def export_time_workbook(self, group: Optional[str], start: Optional[date], end: Optional[date]) -> bytes:
        if not group or not group.strip():
            raise ValidationError(GROUP_REQUIRED)
        if start is None or end is None:
            raise ValidationError("startDate and endDate are required.")
        reports = self.employee_reports(group, start, end)
        logger.info("Workbook export for group %s, %s to %s (%s employees)", group, start, end, len(reports))
        return build_time_workbook(reports)

    def job_details(self, job_number: Optional[str]) -> Sequence[JobDetail]:
        return self._jobs.details((job_number or "").strip())

    def export_job_details(self, job_number: Optional[str]) -> bytes:
        details = self.job_details(job_number)
        logger.info("Job details export for %s (%s rows)", job_number, len(details))
        return build_job_details_workbook(details)
