from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskItem:
    """A selectable task label in the admin-managed catalog."""

    id: int
    task_description: str
