from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Iterable, List, Optional

from ..core.constants import CSV_HEADER
from ..tasks.model import TimesheetLine


def format_duration(value: Optional[float]) -> str:
    """Up to two decimals with trailing zeros dropped (8.50 -> 8.5, 8.00 -> 8)."""
    if value is None:
        return ""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def timesheet_row(line: TimesheetLine) -> List[str]:
    entry = line.entry
    return [
        line.employee,
        line.email or "",
        line.group or "",
        entry.work_date.strftime("%Y-%m-%d") if entry.work_date else "",
        entry.job.job_number_and_job_name if entry.job and entry.job.job_number_and_job_name else "",
        entry.task_name or "",
        format_duration(entry.duration),
        entry.comment or "",
    ]


def render_timesheet(lines: Iterable[TimesheetLine]) -> str:
    """CSV text with the header first; fields holding a comma, quote or line break are quoted."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(timesheet_row(line) for line in lines)
    return out.getvalue()


def timesheet_filename(group: str, now: datetime) -> str:
    return f"timesheet_{group}_{now:%Y%m%d%H%M%S}.csv"
