from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from ..core.enums import JobSource
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, optional_float
from .model import Job, JobDetail, StagedJob
from .repository import JobRepository, StagedJobRepository

_STAGING_TABLES = {
    JobSource.IMPORTED: "imported_jobs",
    JobSource.CREATED: "created_jobs",
}


def _to_job(r: Dict[str, Any]) -> Job:
    return Job(
        id=int(r["job_id"]),
        job_number=str(r["job_number"]),
        job_name=str(r["job_name"]),
        job_number_and_job_name=r.get("job_number_and_job_name"),
    )


class MySQLJobRepository(JobRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, job_id: int) -> Optional[Job]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM jobs WHERE job_id=%s", (job_id,))
            row = fetchone(cur)
            return _to_job(row) if row else None

    def get_by_number(self, job_number: str) -> Optional[Job]:
        with db_cursor(self._conn_factory) as (_, cur):
            # BINARY keeps the match case-sensitive under the default collation.
            cur.execute("SELECT * FROM jobs WHERE job_number = BINARY %s LIMIT 1", (job_number,))
            row = fetchone(cur)
            return _to_job(row) if row else None

    def list_all(self) -> Sequence[Job]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM jobs ORDER BY job_number")
            return [_to_job(r) for r in fetchall(cur)]

    def search(self, term: Optional[str], *, offset: int, limit: int) -> Tuple[int, Sequence[Job]]:
        where = ""
        params: tuple = ()
        if term:
            like = f"%{term}%"
            where = "WHERE job_name LIKE %s OR job_number LIKE %s"
            params = (like, like)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM jobs {where}", params)
            total = int((fetchone(cur) or {}).get("total") or 0)
            cur.execute(
                f"SELECT * FROM jobs {where} ORDER BY job_id LIMIT %s OFFSET %s",
                params + (limit, offset),
            )
            return total, [_to_job(r) for r in fetchall(cur)]

    def create(self, *, job_number: str, job_name: str, job_number_and_job_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO jobs(job_number, job_name, job_number_and_job_name) VALUES(%s,%s,%s)",
                (job_number, job_name, job_number_and_job_name),
            )
            return int(cur.lastrowid)

    def update(self, job: Job) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE jobs SET job_number=%s, job_name=%s, job_number_and_job_name=%s WHERE job_id=%s",
                (job.job_number, job.job_name, job.job_number_and_job_name, job.id),
            )
            return cur.rowcount > 0

    def delete(self, job_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM jobs WHERE job_id=%s", (job_id,))
            return cur.rowcount > 0

    def list_details(self, job_number: str) -> Sequence[JobDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT u.first_name, u.last_name, t.entry_date, t.task_name, t.duration,
                       j.job_number, j.job_name
                FROM task_entries t
                JOIN jobs j ON j.job_id = t.job_id
                LEFT JOIN users u ON u.user_id = t.user_id
                WHERE j.job_number = %s
                ORDER BY u.last_name, u.first_name, t.entry_date
                """,
                (job_number,),
            )
            return [
                JobDetail(
                    first_name=r.get("first_name"),
                    last_name=r.get("last_name"),
                    work_date=normalize_mysql_date(r.get("entry_date")),
                    task_name=r.get("task_name"),
                    duration=optional_float(r.get("duration")),
                    job_number=str(r["job_number"]),
                    job_name=str(r["job_name"]),
                )
                for r in fetchall(cur)
            ]


class MySQLStagedJobRepository(StagedJobRepository):
    """Imported or created jobs, depending on ``source``."""

    def __init__(self, conn_factory: DatabaseConnection, source: JobSource):
        self._conn_factory = conn_factory
        self.source = source
        self._table = _STAGING_TABLES[source]

    def _to_staged(self, r: Dict[str, Any]) -> StagedJob:
        return StagedJob(
            id=int(r["id"]),
            job_number=str(r["job_number"]),
            job_name=str(r["job_name"]),
            job_number_and_job_name=r.get("job_number_and_job_name"),
            source=self.source,
        )

    def list_all(self) -> Sequence[StagedJob]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT * FROM {self._table} ORDER BY id")
            return [self._to_staged(r) for r in fetchall(cur)]

    def add(self, *, job_number: str, job_name: str, job_number_and_job_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {self._table}(job_number, job_name, job_number_and_job_name) VALUES(%s,%s,%s)",
                (job_number, job_name, job_number_and_job_name),
            )
            return int(cur.lastrowid)

    def get_by_number(self, job_number: str) -> Optional[StagedJob]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT * FROM {self._table} WHERE job_number=%s LIMIT 1", (job_number,))
            row = fetchone(cur)
            return self._to_staged(row) if row else None
