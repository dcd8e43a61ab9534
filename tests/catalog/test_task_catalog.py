from __future__ import annotations

import pytest

from src.timeclock.timeclock.catalog.model import TaskItem
from src.timeclock.timeclock.catalog.service import DESCRIPTION_REQUIRED, TaskCatalogService
from src.timeclock.timeclock.core.exceptions import NotFoundError, StorageError, ValidationError

from tests.fakes import InMemoryTaskItems


def test_create_trims_description():
    items = InMemoryTaskItems()
    item = TaskCatalogService(items).create("  Site visit ")
    assert item == TaskItem(1, "Site visit")
    assert items.get_by_id(1).task_description == "Site visit"


@pytest.mark.parametrize("description", [None, "", "   "])
def test_blank_description_rejected(description):
    with pytest.raises(ValidationError, match=DESCRIPTION_REQUIRED):
        TaskCatalogService(InMemoryTaskItems()).create(description)


def test_missing_item_is_not_found():
    with pytest.raises(NotFoundError):
        TaskCatalogService(InMemoryTaskItems()).update(9, "Anything")


def test_write_that_affects_nothing_is_storage_error():
    service = TaskCatalogService(InMemoryTaskItems(TaskItem(1, "Design"), fail_writes=True))
    with pytest.raises(StorageError, match="Unable to create task."):
        service.create("Review")
    with pytest.raises(StorageError, match="Unable to delete task."):
        service.delete(1)
