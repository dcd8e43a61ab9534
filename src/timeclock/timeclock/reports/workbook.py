"""Spreadsheet exports for payroll and job costing."""
from __future__ import annotations

import io
from typing import Iterable, Sequence

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from ..jobs.model import JobDetail
from .model import EmployeeReport, LeaveReportEntry, TaskReportEntry

TIME_SHEET_TITLE = "All Employees Time by Date Range"
TIME_SHEET_HEADERS = ("Employee", "Date", "Job No", "Hours", "Task", "Description", "Per Diem", "Day Total")
TIME_SHEET_WIDTHS = (50, 10, 35, 10, 40, 40, 10, 10)
DAY_TOTAL_COLUMN = 8

JOB_DETAILS_TITLE = "Job Details"
JOB_DETAILS_HEADERS = ("First Name", "Last Name", "Job Number", "Job Name", "Date", "Task", "Duration")
JOB_DETAILS_WIDTHS = (15, 15, 20, 50, 15, 45, 10)

HEADER_FILL = PatternFill(fill_type="solid", start_color="FFD3D3D3", end_color="FFD3D3D3")  # LightGray
SUMMARY_FILL = PatternFill(fill_type="solid", start_color="FFFAFAD2", end_color="FFFAFAD2")  # LightGoldenrodYellow


def _title(ws, text: str, last_column: int) -> None:
    ws.cell(row=1, column=1, value=text)
    ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=last_column)
    ws.cell(row=1, column=1).font = Font(bold=True, size=20)
    ws.cell(row=1, column=1).alignment = Alignment(horizontal="center")


def _widths(ws, widths: Sequence[int]) -> None:
    for idx, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width


def _style_header(ws, last_column: int) -> None:
    for col in range(1, last_column + 1):
        cell = ws.cell(row=2, column=col)
        cell.fill = HEADER_FILL
        cell.font = Font(bold=True)


def _to_bytes(wb: Workbook) -> bytes:
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def build_time_workbook(reports: Iterable[EmployeeReport]) -> bytes:
    """Render every employee's entries, a running total per day and a summary row.

    The day total lands in the last row of each date; when the date changes
    the total is written one row up and restarts.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Sheet1"

    _title(ws, TIME_SHEET_TITLE, 9)
    _widths(ws, TIME_SHEET_WIDTHS)
    for col, header in enumerate(TIME_SHEET_HEADERS, start=1):
        ws.cell(row=2, column=col, value=header)
    _style_header(ws, 9)

    row = 3
    for report in reports:
        user = report.user
        last_date = None
        day_total = 0.0
        first = True

        for item in report.entries:
            if last_date is not None and item.date != last_date and row > 3:
                ws.cell(row=row - 1, column=DAY_TOTAL_COLUMN, value=day_total)
                day_total = 0.0

            if first:
                ws.cell(row=row, column=1, value=f"{user.first_name} {user.last_name} - {user.employee_number}")
                first = False
            else:
                ws.cell(row=row, column=1, value="")
            ws.cell(row=row, column=2, value=item.date.strftime("%m/%d/%y") if item.date else "")

            if isinstance(item, TaskReportEntry):
                task = item.entry
                ws.cell(row=row, column=3, value=task.job.job_number if task.job else None)
                ws.cell(row=row, column=4, value=task.duration)
                ws.cell(row=row, column=5, value=task.task_name)
                ws.cell(row=row, column=6, value=task.comment)
                ws.cell(row=row, column=7, value="TBA")
            elif isinstance(item, LeaveReportEntry):
                leave = item.entry
                ws.cell(row=row, column=3, value=leave.leave_type)
                ws.cell(row=row, column=4, value=leave.leave_duration)
                ws.cell(row=row, column=5, value=leave.leave_type)
                ws.cell(row=row, column=6, value=leave.status)
                ws.cell(row=row, column=7, value="N/A")

            day_total += item.hours
            last_date = item.date
            row += 1

        if last_date is not None and row > 3:
            ws.cell(row=row - 1, column=DAY_TOTAL_COLUMN, value=day_total)

        ws.cell(row=row, column=1, value=f"Summary for {user.first_name} {user.last_name}")
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=2)
        for col in range(1, 5):
            ws.cell(row=row, column=col).fill = SUMMARY_FILL
        ws.cell(row=row, column=4, value=report.total_hours)
        row += 1

    return _to_bytes(wb)


def build_job_details_workbook(details: Sequence[JobDetail]) -> bytes:
    """One block per employee with a bold Total row, then a Grand Total."""
    rows = []
    grand_total = 0.0
    groups: dict = {}
    for d in details:
        groups.setdefault((d.first_name, d.last_name), []).append(d)

    for entries in groups.values():
        user_total = 0.0
        for d in entries:
            rows.append(
                {
                    "First Name": d.first_name,
                    "Last Name": d.last_name,
                    "Job Number": d.job_number,
                    "Job Name": d.job_name,
                    "Date": d.work_date.strftime("%m/%d/%Y") if d.work_date else None,
                    "Task": d.task_name,
                    "Duration": d.duration,
                }
            )
            user_total += d.duration or 0.0
        rows.append({"Task": "Total", "Duration": user_total})
        grand_total += user_total
    rows.append({"Task": "Grand Total", "Duration": grand_total})

    df = pd.DataFrame(rows, columns=list(JOB_DETAILS_HEADERS))

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="JobDetails", startrow=1)
        ws = writer.sheets["JobDetails"]
        _title(ws, JOB_DETAILS_TITLE, len(JOB_DETAILS_HEADERS))
        _widths(ws, JOB_DETAILS_WIDTHS)
        _style_header(ws, len(JOB_DETAILS_HEADERS))
        for excel_row in range(3, ws.max_row + 1):
            if ws.cell(row=excel_row, column=6).value in ("Total", "Grand Total"):
                ws.cell(row=excel_row, column=6).font = Font(bold=True)
                ws.cell(row=excel_row, column=7).font = Font(bold=True)
    return output.getvalue()
