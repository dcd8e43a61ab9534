from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .catalog.mysql_task_item_repository import MySQLTaskItemRepository
from .catalog.repository import TaskItemRepository
from .catalog.service import TaskCatalogService
from .core.constants import DEFAULT_JOBS_PAGE_SIZE
from .core.enums import JobSource, Weekday
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .days.mysql_day_entry_repository import MySQLDayEntryRepository
from .days.repository import DayEntryRepository
from .days.service import ClockService
from .jobs.mysql_job_repository import MySQLJobRepository, MySQLStagedJobRepository
from .jobs.repository import JobRepository, StagedJobRepository
from .jobs.service import JobService
from .leave.mysql_leave_entry_repository import MySQLLeaveEntryRepository
from .leave.repository import LeaveEntryRepository
from .leave.service import LeaveService
from .reports.service import ReportService
from .tasks.mysql_task_entry_repository import MySQLTaskEntryRepository
from .tasks.repository import TaskEntryRepository
from .tasks.service import TaskEntryService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AccountService, AuthService, UserService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    days_repo: DayEntryRepository
    tasks_repo: TaskEntryRepository
    leave_repo: LeaveEntryRepository
    jobs_repo: JobRepository
    imported_jobs_repo: StagedJobRepository
    created_jobs_repo: StagedJobRepository
    task_items_repo: TaskItemRepository

    auth_service: AuthService
    account_service: AccountService
    user_service: UserService
    clock_service: ClockService
    task_entry_service: TaskEntryService
    leave_service: LeaveService
    job_service: JobService
    catalog_service: TaskCatalogService
    dashboard_service: DashboardService
    report_service: ReportService


def wire(
    *,
    conn: Optional[DatabaseConnection],
    users_repo: UserRepository,
    days_repo: DayEntryRepository,
    tasks_repo: TaskEntryRepository,
    leave_repo: LeaveEntryRepository,
    jobs_repo: JobRepository,
    imported_jobs_repo: StagedJobRepository,
    created_jobs_repo: StagedJobRepository,
    task_items_repo: TaskItemRepository,
    week_start: Weekday = Weekday.SUNDAY,
    sync_staged_jobs: bool = True,
    jobs_page_size: int = DEFAULT_JOBS_PAGE_SIZE,
) -> Container:
    """Build services over the given repositories (MySQL in the app, fakes in tests)."""
    auth_service = AuthService(users_repo)
    account_service = AccountService(users_repo)
    user_service = UserService(users_repo)
    clock_service = ClockService(days_repo, week_start=week_start)
    task_entry_service = TaskEntryService(tasks_repo, week_start=week_start)
    leave_service = LeaveService(leave_repo, week_start=week_start)
    job_service = JobService(
        jobs_repo,
        tasks_repo,
        imported_jobs_repo,
        created_jobs_repo,
        default_page_size=jobs_page_size,
    )
    catalog_service = TaskCatalogService(task_items_repo)
    dashboard_service = DashboardService(
        user_service,
        days_repo,
        tasks_repo,
        leave_repo,
        job_service,
        catalog_service,
        week_start=week_start,
        sync_staged_jobs=sync_staged_jobs,
    )
    report_service = ReportService(users_repo, tasks_repo, leave_repo, job_service)

    return Container(
        conn=conn,
        users_repo=users_repo,
        days_repo=days_repo,
        tasks_repo=tasks_repo,
        leave_repo=leave_repo,
        jobs_repo=jobs_repo,
        imported_jobs_repo=imported_jobs_repo,
        created_jobs_repo=created_jobs_repo,
        task_items_repo=task_items_repo,
        auth_service=auth_service,
        account_service=account_service,
        user_service=user_service,
        clock_service=clock_service,
        task_entry_service=task_entry_service,
        leave_service=leave_service,
        job_service=job_service,
        catalog_service=catalog_service,
        dashboard_service=dashboard_service,
        report_service=report_service,
    )


def build_container(
    *,
    db_config: dict,
    week_start: Weekday = Weekday.SUNDAY,
    sync_staged_jobs: bool = True,
    jobs_page_size: int = DEFAULT_JOBS_PAGE_SIZE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        days_repo=MySQLDayEntryRepository(conn),
        tasks_repo=MySQLTaskEntryRepository(conn),
        leave_repo=MySQLLeaveEntryRepository(conn),
        jobs_repo=MySQLJobRepository(conn),
        imported_jobs_repo=MySQLStagedJobRepository(conn, JobSource.IMPORTED),
        created_jobs_repo=MySQLStagedJobRepository(conn, JobSource.CREATED),
        task_items_repo=MySQLTaskItemRepository(conn),
        week_start=week_start,
        sync_staged_jobs=sync_staged_jobs,
        jobs_page_size=jobs_page_size,
    )
