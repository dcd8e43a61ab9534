"""Cursor handling and row conversions shared by the MySQL repositories."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import parse_date_value, parse_time_value
from .connection import DatabaseConnection

Row = Dict[str, Any]


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection per unit of work; commit on success, roll back on error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Row]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Row]:
    return list(cur.fetchall() or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """TIME columns come back as ``timedelta`` from mysql-connector."""
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return time(seconds // 3600, (seconds % 3600) // 60, seconds % 60)
    return parse_time_value(str(value))


def normalize_mysql_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date_value(str(value))


def optional_float(value: Any) -> Optional[float]:
    # DECIMAL columns arrive as Decimal
    return None if value is None else float(value)


def entry_keys(row: Row) -> Dict[str, Any]:
    """Owner, week bucket, date and weekday columns common to every entry table."""
    return {
        "user_id": row.get("user_id"),
        "week_of": normalize_mysql_date(row.get("week_of")),
        "work_date": normalize_mysql_date(row.get("entry_date")),
        "day_name": row.get("day_name"),
    }


def entry_key_values(entry) -> tuple:
    return (entry.user_id, entry.week_of, entry.work_date, entry.day_name)
