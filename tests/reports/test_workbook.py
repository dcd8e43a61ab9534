from __future__ import annotations

import io
from datetime import date

from openpyxl import load_workbook

from src.timeclock.timeclock.jobs.model import Job
from src.timeclock.timeclock.leave.model import LeaveEntry
from src.timeclock.timeclock.tasks.model import TaskEntry

from tests.fakes import InMemoryJobs, InMemoryLeave, InMemoryTasks, InMemoryUsers, make_container, make_user


def _container():
    users = InMemoryUsers(make_user(2), make_user(3, group="Other"))
    jobs = InMemoryJobs(Job(1, "100", "Office", "100 - Office"))
    tasks = InMemoryTasks(
        TaskEntry(id=1, user_id=2, week_of=None, work_date=date(2025, 1, 6), job_id=1, task_name="Design",
                  duration=4.0, comment="AM"),
        TaskEntry(id=2, user_id=2, week_of=None, work_date=date(2025, 1, 6), job_id=1, task_name="Drafting",
                  duration=3.0),
        TaskEntry(id=3, user_id=2, week_of=None, work_date=date(2025, 1, 7), job_id=1, task_name="Design",
                  duration=5.0),
        users=users,
        jobs=jobs,
    )
    leave = InMemoryLeave(
        LeaveEntry(id=1, user_id=2, week_of=None, work_date=date(2025, 1, 7), leave_type="PTO", leave_duration=3.0,
                   status="Approved"),
        LeaveEntry(id=2, user_id=2, week_of=None, work_date=date(2025, 1, 8), leave_type="UPTO", leave_duration=8.0),
    )
    return make_container(users=users, jobs=jobs, tasks=tasks, leave=leave)


def test_time_workbook_layout():
    content = _container().report_service.export_time_workbook("Group1", date(2025, 1, 6), date(2025, 1, 8))
    ws = load_workbook(io.BytesIO(content)).active

    assert ws.title == "Sheet1"
    assert ws["A1"].value == "All Employees Time by Date Range"
    assert "A1:I1" in {str(r) for r in ws.merged_cells.ranges}
    assert [ws.cell(row=2, column=c).value for c in range(1, 9)] == [
        "Employee", "Date", "Job No", "Hours", "Task", "Description", "Per Diem", "Day Total",
    ]
    assert ws.column_dimensions["A"].width == 50

    # rows 3-4: Monday tasks, day total on the last Monday row
    assert ws["A3"].value == "First2 Last2 - 1002"
    assert ws["B3"].value == "01/06/25"
    assert ws["C3"].value == "100"
    assert ws["G3"].value == "TBA"
    assert ws["H3"].value is None
    assert ws["H4"].value == 7.0

    # rows 5-6: Tuesday task then PTO leave
    assert ws["E5"].value == "Design"
    assert ws["C6"].value == "PTO"
    assert ws["F6"].value == "Approved"
    assert ws["G6"].value == "N/A"
    assert ws["H6"].value == 8.0

    # row 7: UPTO leave on Wednesday, last total written after the loop
    assert ws["H7"].value == 8.0

    # row 8: summary excludes unpaid leave
    assert ws["A8"].value == "Summary for First2 Last2"
    assert ws["D8"].value == 15.0
    assert "A8:B8" in {str(r) for r in ws.merged_cells.ranges}


def test_job_details_workbook_totals():
    content = _container().report_service.export_job_details("100")
    ws = load_workbook(io.BytesIO(content))["JobDetails"]

    assert ws["A1"].value == "Job Details"
    assert ws["A2"].value == "First Name"
    assert ws["G2"].value == "Duration"
    assert ws["E3"].value == "01/06/2025"

    labels = {ws.cell(row=r, column=6).value: ws.cell(row=r, column=7).value for r in range(3, ws.max_row + 1)}
    assert labels["Total"] == 12.0
    assert labels["Grand Total"] == 12.0
