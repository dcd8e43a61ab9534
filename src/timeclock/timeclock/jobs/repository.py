from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from ..core.enums import JobSource
from .model import Job, JobDetail, StagedJob


class JobRepository(Protocol):
    def get_by_id(self, job_id: int) -> Optional[Job]:
        raise NotImplementedError

    def get_by_number(self, job_number: str) -> Optional[Job]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Job]:
        raise NotImplementedError

    def search(self, term: Optional[str], *, offset: int, limit: int) -> Tuple[int, Sequence[Job]]:
        """Return (total matching, page) for a substring match on number or name."""

        raise NotImplementedError

    def create(self, *, job_number: str, job_name: str, job_number_and_job_name: str) -> int:
        raise NotImplementedError

    def update(self, job: Job) -> bool:
        raise NotImplementedError

    def delete(self, job_id: int) -> bool:
        raise NotImplementedError

    def list_details(self, job_number: str) -> Sequence[JobDetail]:
        raise NotImplementedError


class StagedJobRepository(Protocol):
    source: JobSource

    def list_all(self) -> Sequence[StagedJob]:
        raise NotImplementedError

    def add(self, *, job_number: str, job_name: str, job_number_and_job_name: str) -> int:
        raise NotImplementedError

    def get_by_number(self, job_number: str) -> Optional[StagedJob]:
        raise NotImplementedError
