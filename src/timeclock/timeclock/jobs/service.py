from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import IO, Iterable, Optional, Sequence, Tuple, Union

from ..common.validators import require_at_least, require_text
from ..core.constants import DEFAULT_JOBS_PAGE_SIZE
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..tasks.repository import TaskEntryRepository
from .importer import read_jobs_csv
from .model import Job, JobDetail, JobPage, StagedJob, display_name
from .repository import JobRepository, StagedJobRepository

logger = logging.getLogger(__name__)

JOB_FIELDS_REQUIRED = "Job name and number are required."
DUPLICATE_JOB_NUMBER = "A job with the same job number already exists."
JOB_NOT_FOUND = "Job not found."
JOB_IN_USE = (
    "Cannot delete this job because it has associated task entries. "
    "Please delete the task entries first."
)


@dataclass(frozen=True)
class ImportResult:
    rows_read: int
    staged: int
    synced: int


class JobService:
    """Use case: the job catalog and its staging tables."""

    def __init__(
        self,
        jobs: JobRepository,
        tasks: TaskEntryRepository,
        imported: StagedJobRepository,
        created: StagedJobRepository,
        *,
        default_page_size: int = DEFAULT_JOBS_PAGE_SIZE,
    ):
        self._jobs = jobs
        self._tasks = tasks
        self._imported = imported
        self._created = created
        self._default_page_size = int(default_page_size)

    # -------- catalog --------
    def list_all(self) -> Sequence[Job]:
        return self._jobs.list_all()

    def list_page(
        self,
        search_term: Optional[str] = None,
        page_number: int = 1,
        page_size: Optional[int] = None,
    ) -> JobPage:
        page_size = self._default_page_size if page_size is None else int(page_size)
        require_at_least(page_number, "pageNumber")
        require_at_least(page_size, "pageSize")

        total, jobs = self._jobs.search(
            search_term or None,
            offset=(page_number - 1) * page_size,
            limit=page_size,
        )
        return JobPage(
            total_jobs=total,
            page_number=page_number,
            page_size=page_size,
            total_pages=math.ceil(total / page_size),
            jobs=list(jobs),
        )

    def get(self, job_id: int) -> Job:
        job = self._jobs.get_by_id(job_id)
        if job is None:
            raise NotFoundError(JOB_NOT_FOUND)
        return job

    def create(self, job_number: Optional[str], job_name: Optional[str]) -> Job:
        job_number, job_name = _require_fields(job_number, job_name)
        if self._jobs.get_by_number(job_number) is not None:
            raise ConflictError(DUPLICATE_JOB_NUMBER)

        label = display_name(job_number, job_name)
        job_id = self._jobs.create(job_number=job_number, job_name=job_name, job_number_and_job_name=label)
        logger.info("Created job %s", label)
        return Job(id=job_id, job_number=job_number, job_name=job_name, job_number_and_job_name=label)

    def update(self, job_id: int, job: Job) -> Job:
        if job_id != job.id:
            raise ValidationError("Job id does not match the request path.")
        self.get(job_id)

        job_number, job_name = _require_fields(job.job_number, job.job_name)
        job = replace(
            job,
            job_number=job_number,
            job_name=job_name,
            job_number_and_job_name=display_name(job_number, job_name),
        )
        if not self._jobs.update(job):
            raise NotFoundError(JOB_NOT_FOUND)
        return job

    def delete(self, job_id: int) -> None:
        job = self.get(job_id)
        if self._tasks.exists_for_job(job.id):
            raise ConflictError(JOB_IN_USE)
        self._jobs.delete(job.id)
        logger.info("Deleted job %s", job.job_number_and_job_name or job.job_number)

    def details(self, job_number: str) -> Sequence[JobDetail]:
        return self._jobs.list_details(job_number)

    # -------- staging --------
    def submit_created(self, job_number: Optional[str], job_name: Optional[str]) -> StagedJob:
        """Queue a user-created job; it reaches the catalog on the next sync."""
        job_number, job_name = _require_fields(job_number, job_name)
        if self._jobs.get_by_number(job_number) or self._created.get_by_number(job_number):
            raise ConflictError(DUPLICATE_JOB_NUMBER)

        label = display_name(job_number, job_name)
        staged_id = self._created.add(job_number=job_number, job_name=job_name, job_number_and_job_name=label)
        logger.info("Job %s submitted for the catalog", label)
        return StagedJob(
            id=staged_id,
            job_number=job_number,
            job_name=job_name,
            job_number_and_job_name=label,
            source=self._created.source,
        )

    def sync_staged_jobs(self) -> int:
        """Copy staged jobs whose number is not in the catalog yet.

        Imported jobs go first, then created ones; a number is added once.
        """
        known = {job.job_number for job in self._jobs.list_all()}
        added = 0
        for staging in (self._imported, self._created):
            for staged in staging.list_all():
                if staged.job_number in known:
                    continue
                self._jobs.create(
                    job_number=staged.job_number,
                    job_name=staged.job_name,
                    job_number_and_job_name=staged.job_number_and_job_name
                    or display_name(staged.job_number, staged.job_name),
                )
                known.add(staged.job_number)
                added += 1
        if added:
            logger.info("Synced %s staged jobs into the catalog", added)
        return added

    def import_rows(self, rows: Iterable[Tuple[str, str]]) -> ImportResult:
        seen = {job.job_number for job in self._imported.list_all()}
        read = staged = 0
        for job_number, job_name in rows:
            read += 1
            job_number = (job_number or "").strip()
            job_name = (job_name or "").strip()
            if not job_number or job_number in seen:
                continue
            self._imported.add(
                job_number=job_number,
                job_name=job_name,
                job_number_and_job_name=display_name(job_number, job_name),
            )
            seen.add(job_number)
            staged += 1

        synced = self.sync_staged_jobs()
        logger.info("Job import: %s rows read, %s staged, %s synced", read, staged, synced)
        return ImportResult(rows_read=read, staged=staged, synced=synced)

    def import_csv(self, source: Union[str, IO]) -> ImportResult:
        return self.import_rows(read_jobs_csv(source))


def _require_fields(job_number: Optional[str], job_name: Optional[str]) -> Tuple[str, str]:
    return require_text(job_number, JOB_FIELDS_REQUIRED), require_text(job_name, JOB_FIELDS_REQUIRED)
