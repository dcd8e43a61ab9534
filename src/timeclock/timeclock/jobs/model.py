from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..core.enums import JobSource


def display_name(job_number: str, job_name: str) -> str:
    return f"{job_number} - {job_name}"


@dataclass(frozen=True)
class Job:
    """A billable work code that task entries are booked against."""

    id: int
    job_number: str
    job_name: str
    job_number_and_job_name: Optional[str] = None


@dataclass(frozen=True)
class StagedJob:
    """A job waiting in a staging table to be copied into the catalog."""

    id: int
    job_number: str
    job_name: str
    job_number_and_job_name: Optional[str] = None
    source: JobSource = JobSource.IMPORTED


@dataclass(frozen=True)
class JobPage:
    total_jobs: int
    page_number: int
    page_size: int
    total_pages: int
    jobs: Sequence[Job]


@dataclass(frozen=True)
class JobDetail:
    """One task entry booked to a job, with the employee's name."""

    first_name: Optional[str]
    last_name: Optional[str]
    work_date: Optional[date]
    task_name: Optional[str]
    duration: Optional[float]
    job_number: str
    job_name: str
