from __future__ import annotations

import io
import logging
from typing import Optional

from flask import Flask, send_file

from ..common.payload import Payload
from ..common.web import (
    admin_required,
    current_caller,
    error_response,
    json_ok,
    login_required,
    query_payload,
    request_payload,
)
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from ..days.model import DayEntry
from ..jobs.service import JOB_FIELDS_REQUIRED
from ..leave.model import LeaveEntry
from ..tasks.model import TaskEntry

logger = logging.getLogger(__name__)


def _user_id(p: Payload) -> Optional[int]:
    if "AppUserId" in p:
        return p.get_optional_int("AppUserId")
    return p.get_optional_int("UserId")


def _work_date(p: Payload):
    return p.get_date("Date") if "Date" in p else p.get_date("WorkDate")


def day_entry_from(p: Optional[Payload]) -> Optional[DayEntry]:
    if p is None:
        return None
    return DayEntry(
        id=p.get_int("Id"),
        user_id=_user_id(p),
        week_of=p.get_date("WeekOf"),
        work_date=_work_date(p),
        day_name=p.get_str("DayName"),
        day_start_time=p.get_time("DayStartTime"),
        day_end_time=p.get_time("DayEndTime"),
        lunch_start_time=p.get_time("LunchStartTime"),
        lunch_end_time=p.get_time("LunchEndTime"),
        day_duration=p.get_float("DayDuration"),
        lunch_duration=p.get_float("LunchDuration"),
        work_duration=p.get_float("WorkDuration"),
        comment=p.get_str("Comment"),
        status=p.get_str("Status"),
    )


def task_entry_from(p: Optional[Payload]) -> Optional[TaskEntry]:
    if p is None:
        return None
    return TaskEntry(
        id=p.get_int("Id"),
        user_id=_user_id(p),
        week_of=p.get_date("WeekOf"),
        work_date=_work_date(p),
        day_name=p.get_str("DayName"),
        job_id=p.get_optional_int("JobId"),
        task_name=p.get_str("TaskName"),
        start_time=p.get_time("StartTime"),
        end_time=p.get_time("EndTime"),
        duration=p.get_float("Duration"),
        comment=p.get_str("Comment"),
        status=p.get_str("Status"),
    )


def leave_entry_from(p: Optional[Payload]) -> Optional[LeaveEntry]:
    if p is None:
        return None
    return LeaveEntry(
        id=p.get_int("Id"),
        user_id=_user_id(p),
        week_of=p.get_date("WeekOf"),
        work_date=_work_date(p),
        day_name=p.get_str("DayName"),
        leave_type=p.get_str("LeaveType"),
        leave_duration=p.get_float("LeaveDuration"),
        status=p.get_str("Status"),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/Dashboard/Index", methods=["GET"], endpoint="dashboard_index")
    @login_required
    def index():
        caller = current_caller()
        try:
            query = query_payload()
            view = container.dashboard_service.build(
                caller,
                user_id=query.get_optional_int("userId"),
                week_select=query.get_date("WeekSelect"),
            )
        except DomainError as e:
            return error_response(e)
        except Exception as e:
            logger.exception("Dashboard failed for user %s", caller.user_id)
            return f"Internal Server Error: {e}", 500
        return json_ok(view)

    @app.route("/api/Dashboard/ClockInOut", methods=["POST"], endpoint="dashboard_clock")
    @login_required
    def clock_in_out():
        try:
            entry = day_entry_from(request_payload().section("DayEntry"))
            container.clock_service.clock_in_out(current_caller(), entry)
        except DomainError as e:
            return error_response(e)
        return json_ok({"message": "Clock In/Out successful"})

    @app.route("/api/Dashboard/AddTaskEntry", methods=["POST"], endpoint="dashboard_add_task")
    @login_required
    def add_task_entry():
        try:
            entry = task_entry_from(request_payload().section("TaskEntry"))
            container.task_entry_service.save(current_caller(), entry)
        except DomainError as e:
            return error_response(e)
        return "Task entry added/updated successfully", 200

    @app.route("/api/Dashboard/DeleteTaskEntry/<int:entry_id>", methods=["DELETE"], endpoint="dashboard_delete_task")
    @login_required
    def delete_task_entry(entry_id: int):
        try:
            container.task_entry_service.delete(current_caller(), entry_id)
        except DomainError as e:
            return error_response(e)
        return "Task entry deleted successfully.", 200

    @app.route("/api/Dashboard/AddLeave", methods=["POST"], endpoint="dashboard_add_leave")
    @login_required
    def add_leave():
        try:
            entry = leave_entry_from(request_payload().section("LeaveEntry"))
            container.leave_service.save(current_caller(), entry)
        except DomainError as e:
            return error_response(e)
        return "Leave entry added/updated successfully", 200

    @app.route("/api/Dashboard/DeleteLeave/<int:entry_id>", methods=["DELETE"], endpoint="dashboard_delete_leave")
    @login_required
    def delete_leave(entry_id: int):
        try:
            container.leave_service.delete(current_caller(), entry_id)
        except DomainError as e:
            return error_response(e)
        return "Leave entry deleted successfully.", 200

    @app.route("/api/Dashboard/DeleteDay/<int:entry_id>", methods=["DELETE"], endpoint="dashboard_delete_day")
    @login_required
    def delete_day(entry_id: int):
        try:
            container.clock_service.delete(current_caller(), entry_id)
        except DomainError as e:
            return error_response(e)
        return "Day entry deleted successfully.", 200

    @app.route("/api/Dashboard/DeleteDayByDate", methods=["DELETE"], endpoint="dashboard_delete_day_by_date")
    @login_required
    def delete_day_by_date():
        try:
            query = query_payload()
            work_date = query.get_date("date")
            if work_date is None:
                raise ValidationError("date is required.")
            container.clock_service.delete_for_date(current_caller(), work_date, query.get_optional_int("userId"))
        except DomainError as e:
            return error_response(e)
        return "Day entries deleted successfully.", 200

    @app.route("/api/Dashboard/AddJob", methods=["POST"], endpoint="dashboard_add_job")
    @admin_required
    def add_job():
        try:
            job = request_payload().section("JobModel")
            if job is None:
                raise ValidationError(JOB_FIELDS_REQUIRED)
            container.job_service.create(job.get_str("JobNumber"), job.get_str("JobName"))
        except DomainError as e:
            return error_response(e)
        return "Job created successfully.", 200

    @app.route("/api/Dashboard/ExportTimeSheet", methods=["GET"], endpoint="dashboard_export_timesheet")
    @admin_required
    def export_timesheet():
        try:
            query = query_payload()
            filename, text = container.report_service.export_timesheet(
                query.get_str("group"),
                query.get_date("fromDate"),
                query.get_date("toDate"),
            )
        except DomainError as e:
            return error_response(e)
        return send_file(
            io.BytesIO(text.encode("utf-8")),
            mimetype="text/csv",
            as_attachment=True,
            download_name=filename,
        )
