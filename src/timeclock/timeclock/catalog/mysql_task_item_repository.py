from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TaskItem
from .repository import TaskItemRepository


class MySQLTaskItemRepository(TaskItemRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[TaskItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT task_item_id, task_description FROM task_items ORDER BY task_item_id")
            return [TaskItem(id=int(r["task_item_id"]), task_description=r["task_description"]) for r in fetchall(cur)]

    def get_by_id(self, item_id: int) -> Optional[TaskItem]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT task_item_id, task_description FROM task_items WHERE task_item_id=%s",
                (item_id,),
            )
            r = fetchone(cur)
            return TaskItem(id=int(r["task_item_id"]), task_description=r["task_description"]) if r else None

    def create(self, task_description: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO task_items(task_description) VALUES(%s)", (task_description,))
            return int(cur.lastrowid or 0)

    def update(self, item: TaskItem) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE task_items SET task_description=%s WHERE task_item_id=%s",
                (item.task_description, item.id),
            )
            return cur.rowcount > 0

    def delete(self, item_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM task_items WHERE task_item_id=%s", (item_id,))
            return cur.rowcount > 0
