from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, entry_key_values, entry_keys, fetchall, fetchone, optional_float
from .model import LeaveEntry
from .repository import LeaveEntryRepository

_COLUMNS = "leave_entry_id, user_id, week_of, entry_date, day_name, leave_type, leave_duration, status"


def _to_entry(r: Dict[str, Any]) -> LeaveEntry:
    return LeaveEntry(
        id=int(r["leave_entry_id"]),
        **entry_keys(r),
        leave_type=r.get("leave_type"),
        leave_duration=optional_float(r.get("leave_duration")),
        status=r.get("status"),
    )


class MySQLLeaveEntryRepository(LeaveEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[LeaveEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_entries WHERE leave_entry_id=%s", (entry_id,))
            row = fetchone(cur)
            return _to_entry(row) if row else None

    def list_for_user_week(self, user_id: int, week_of: date) -> Sequence[LeaveEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM leave_entries WHERE user_id=%s AND week_of=%s ORDER BY entry_date",
                (user_id, week_of),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_for_user_range(self, user_id: int, start: date, end: date) -> Sequence[LeaveEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM leave_entries
                WHERE user_id=%s AND entry_date BETWEEN %s AND %s
                ORDER BY entry_date
                """,
                (user_id, start, end),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def create(self, entry: LeaveEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_entries(user_id, week_of, entry_date, day_name, leave_type, leave_duration, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                entry_key_values(entry) + (entry.leave_type, entry.leave_duration, entry.status),
            )
            return int(cur.lastrowid)

    def update(self, entry: LeaveEntry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_entries
                SET user_id=%s, week_of=%s, entry_date=%s, day_name=%s,
                    leave_type=%s, leave_duration=%s, status=%s
                WHERE leave_entry_id=%s
                """,
                entry_key_values(entry) + (entry.leave_type, entry.leave_duration, entry.status, entry.id),
            )
            return cur.rowcount > 0

    def delete(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM leave_entries WHERE leave_entry_id=%s", (entry_id,))
            return cur.rowcount > 0
