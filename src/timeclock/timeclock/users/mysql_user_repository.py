from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AppUser
from .repository import UserRepository

_COLUMNS = """
    user_id, email, password_hash, first_name, last_name, employee_number, user_group, role, is_active
"""


def _to_user(row: Dict[str, Any]) -> AppUser:
    return AppUser(
        user_id=int(row["user_id"]),
        email=row["email"],
        password_hash=row["password_hash"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        employee_number=row.get("employee_number"),
        group=row.get("user_group"),
        role=Role(row["role"]),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[AppUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[AppUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        employee_number: int,
        group: str,
        role: Role,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(email, password_hash, first_name, last_name, employee_number, user_group, role, is_active)
                VALUES(%s,%s,%s,%s,%s,%s,%s,1)
                """,
                (email, password_hash, first_name, last_name, employee_number, group, role.value),
            )
            return int(cur.lastrowid)

    def list_all(self) -> Sequence[AppUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users ORDER BY last_name, first_name")
            return [_to_user(r) for r in fetchall(cur)]

    def list_by_group(self, group: str) -> Sequence[AppUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE user_group=%s ORDER BY last_name, first_name",
                (group,),
            )
            return [_to_user(r) for r in fetchall(cur)]
