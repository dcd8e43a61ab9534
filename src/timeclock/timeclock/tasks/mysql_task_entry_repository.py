from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    entry_key_values,
    entry_keys,
    fetchall,
    fetchone,
    normalize_mysql_time,
    optional_float,
)
from ..jobs.model import Job
from .model import TaskEntry, TimesheetLine
from .repository import TaskEntryRepository

_SELECT = """
    SELECT t.task_entry_id, t.user_id, t.week_of, t.entry_date, t.day_name, t.job_id,
           t.task_name, t.start_time, t.end_time, t.duration, t.comment, t.status,
           j.job_number, j.job_name, j.job_number_and_job_name
    FROM task_entries t
    LEFT JOIN jobs j ON j.job_id = t.job_id
"""


def _to_entry(r: Dict[str, Any]) -> TaskEntry:
    job = None
    if r.get("job_id") is not None and r.get("job_number") is not None:
        job = Job(
            id=int(r["job_id"]),
            job_number=str(r["job_number"]),
            job_name=str(r.get("job_name") or ""),
            job_number_and_job_name=r.get("job_number_and_job_name"),
        )
    return TaskEntry(
        id=int(r["task_entry_id"]),
        **entry_keys(r),
        job_id=r.get("job_id"),
        task_name=r.get("task_name"),
        start_time=normalize_mysql_time(r.get("start_time")),
        end_time=normalize_mysql_time(r.get("end_time")),
        duration=optional_float(r.get("duration")),
        comment=r.get("comment"),
        status=r.get("status"),
        job=job,
    )


def _values(e: TaskEntry) -> tuple:
    return entry_key_values(e) + (
        e.job_id,
        e.task_name,
        e.start_time,
        e.end_time,
        e.duration,
        e.comment,
        e.status,
    )


class MySQLTaskEntryRepository(TaskEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[TaskEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE t.task_entry_id=%s", (entry_id,))
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def list_for_user_week(self, user_id: int, week_of: date) -> Sequence[TaskEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE t.user_id=%s AND t.week_of=%s ORDER BY t.entry_date, t.task_entry_id",
                (user_id, week_of),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def get_last_for_user(self, user_id: int) -> Optional[TaskEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE t.user_id=%s ORDER BY t.entry_date DESC, t.task_entry_id DESC LIMIT 1",
                (user_id,),
            )
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def list_for_user_range(self, user_id: int, start: date, end: date) -> Sequence[TaskEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE t.user_id=%s AND t.entry_date BETWEEN %s AND %s ORDER BY t.entry_date",
                (user_id, start, end),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_by_group_and_range(
        self,
        group: str,
        from_date: Optional[date],
        to_date: Optional[date],
    ) -> Sequence[TimesheetLine]:
        clauses: List[str] = ["u.user_group=%s"]
        params: List[Any] = [group]
        if from_date:
            clauses.append("t.entry_date >= %s")
            params.append(from_date)
        if to_date:
            clauses.append("t.entry_date < %s")
            params.append(to_date + timedelta(days=1))

        sql = f"""
            SELECT t.task_entry_id, t.user_id, t.week_of, t.entry_date, t.day_name, t.job_id,
                   t.task_name, t.start_time, t.end_time, t.duration, t.comment, t.status,
                   j.job_number, j.job_name, j.job_number_and_job_name,
                   u.first_name, u.last_name, u.email, u.user_group
            FROM task_entries t
            JOIN users u ON u.user_id = t.user_id
            LEFT JOIN jobs j ON j.job_id = t.job_id
            WHERE {' AND '.join(clauses)}
            ORDER BY t.entry_date, u.last_name
        """
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [
                TimesheetLine(
                    first_name=r.get("first_name"),
                    last_name=r.get("last_name"),
                    email=r.get("email"),
                    group=r.get("user_group"),
                    entry=_to_entry(r),
                )
                for r in fetchall(cur)
            ]

    def create(self, entry: TaskEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO task_entries(
                    user_id, week_of, entry_date, day_name, job_id, task_name,
                    start_time, end_time, duration, comment, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _values(entry),
            )
            return int(cur.lastrowid)

    def update(self, entry: TaskEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE task_entries
                SET user_id=%s, week_of=%s, entry_date=%s, day_name=%s, job_id=%s, task_name=%s,
                    start_time=%s, end_time=%s, duration=%s, comment=%s, status=%s
                WHERE task_entry_id=%s
                """,
                _values(entry) + (entry.id,),
            )
            return cur.rowcount > 0

    def delete(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM task_entries WHERE task_entry_id=%s", (entry_id,))
            return cur.rowcount > 0

    def exists_for_job(self, job_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 FROM task_entries WHERE job_id=%s LIMIT 1", (job_id,))
            return fetchone(cur) is not None
