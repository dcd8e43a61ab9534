from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TaskItem


class TaskItemRepository(Protocol):
    def list_all(self) -> Sequence[TaskItem]:
        raise NotImplementedError

    def get_by_id(self, item_id: int) -> Optional[TaskItem]:
        raise NotImplementedError

    def create(self, task_description: str) -> int:
        """Return the new id, or 0 when nothing was written."""

        raise NotImplementedError

    def update(self, item: TaskItem) -> bool:
        raise NotImplementedError

    def delete(self, item_id: int) -> bool:
        raise NotImplementedError
