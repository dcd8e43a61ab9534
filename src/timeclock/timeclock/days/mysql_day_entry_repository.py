from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

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
from .model import DayEntry
from .repository import DayEntryRepository

_COLUMNS = """
    day_entry_id, user_id, week_of, entry_date, day_name,
    day_start_time, day_end_time, lunch_start_time, lunch_end_time,
    day_duration, lunch_duration, work_duration, comment, status
"""


def _to_entry(r: Dict[str, Any]) -> DayEntry:
    return DayEntry(
        id=int(r["day_entry_id"]),
        **entry_keys(r),
        day_start_time=normalize_mysql_time(r.get("day_start_time")),
        day_end_time=normalize_mysql_time(r.get("day_end_time")),
        lunch_start_time=normalize_mysql_time(r.get("lunch_start_time")),
        lunch_end_time=normalize_mysql_time(r.get("lunch_end_time")),
        day_duration=optional_float(r.get("day_duration")),
        lunch_duration=optional_float(r.get("lunch_duration")),
        work_duration=optional_float(r.get("work_duration")),
        comment=r.get("comment"),
        status=r.get("status"),
    )


def _values(e: DayEntry) -> tuple:
    return entry_key_values(e) + (
        e.day_start_time,
        e.day_end_time,
        e.lunch_start_time,
        e.lunch_end_time,
        e.day_duration,
        e.lunch_duration,
        e.work_duration,
        e.comment,
        e.status,
    )


class MySQLDayEntryRepository(DayEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[DayEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM day_entries WHERE day_entry_id=%s", (entry_id,))
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def list_for_user_week(self, user_id: int, week_of: date) -> Sequence[DayEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM day_entries
                WHERE user_id=%s AND week_of=%s
                ORDER BY entry_date, day_start_time
                """,
                (user_id, week_of),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def create(self, entry: DayEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO day_entries(
                    user_id, week_of, entry_date, day_name,
                    day_start_time, day_end_time, lunch_start_time, lunch_end_time,
                    day_duration, lunch_duration, work_duration, comment, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _values(entry),
            )
            return int(cur.lastrowid)

    def update(self, entry: DayEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE day_entries
                SET user_id=%s, week_of=%s, entry_date=%s, day_name=%s,
                    day_start_time=%s, day_end_time=%s, lunch_start_time=%s, lunch_end_time=%s,
                    day_duration=%s, lunch_duration=%s, work_duration=%s, comment=%s, status=%s
                WHERE day_entry_id=%s
                """,
                _values(entry) + (entry.id,),
            )
            return cur.rowcount > 0

    def delete(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM day_entries WHERE day_entry_id=%s", (entry_id,))
            return cur.rowcount > 0

    def delete_for_user_and_date(self, user_id: int, work_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM day_entries WHERE user_id=%s AND entry_date=%s", (user_id, work_date))
            return int(cur.rowcount)
