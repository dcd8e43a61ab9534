from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_text
from ..core.exceptions import NotFoundError, StorageError
from .model import TaskItem
from .repository import TaskItemRepository

logger = logging.getLogger(__name__)

DESCRIPTION_REQUIRED = "Task description is required."


class TaskCatalogService:
    """Use case: maintain the list of task labels offered on the dashboard."""

    def __init__(self, items: TaskItemRepository):
        self._items = items

    def list_all(self) -> Sequence[TaskItem]:
        return self._items.list_all()

    def get(self, item_id: int) -> TaskItem:
        item = self._items.get_by_id(item_id)
        if item is None:
            raise NotFoundError("Task not found.")
        return item

    def create(self, description: Optional[str]) -> TaskItem:
        description = _clean(description)
        new_id = self._items.create(description)
        if not new_id:
            raise StorageError("Unable to create task.")
        logger.info("Added task %r (id=%s)", description, new_id)
        return TaskItem(id=new_id, task_description=description)

    def update(self, item_id: int, description: Optional[str]) -> TaskItem:
        description = _clean(description)
        existing = self.get(item_id)
        item = TaskItem(id=existing.id, task_description=description)
        if not self._items.update(item):
            raise StorageError("Unable to update task.")
        return item

    def delete(self, item_id: int) -> None:
        existing = self.get(item_id)
        if not self._items.delete(existing.id):
            raise StorageError("Unable to delete task.")
        logger.info("Removed task %s", item_id)


def _clean(description: Optional[str]) -> str:
    return require_text(description, DESCRIPTION_REQUIRED)
