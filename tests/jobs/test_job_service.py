from __future__ import annotations

import io
from datetime import date

import pytest

from src.timeclock.timeclock.core.enums import JobSource
from src.timeclock.timeclock.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.timeclock.timeclock.jobs.model import Job
from src.timeclock.timeclock.jobs.service import JobService
from src.timeclock.timeclock.tasks.model import TaskEntry

from tests.fakes import InMemoryJobs, InMemoryStagedJobs, InMemoryTasks


def _service(jobs=None, tasks=None, imported=None, created=None) -> JobService:
    return JobService(
        jobs or InMemoryJobs(),
        tasks or InMemoryTasks(),
        imported or InMemoryStagedJobs(JobSource.IMPORTED),
        created or InMemoryStagedJobs(JobSource.CREATED),
    )


def test_create_sets_display_name():
    jobs = InMemoryJobs()
    job = _service(jobs).create("2024-001", "Bridge Survey")
    assert job.job_number_and_job_name == "2024-001 - Bridge Survey"
    assert jobs.get_by_number("2024-001").job_number_and_job_name == "2024-001 - Bridge Survey"


def test_create_rejects_duplicate_number():
    jobs = InMemoryJobs(Job(1, "2024-001", "Bridge Survey", "2024-001 - Bridge Survey"))
    with pytest.raises(ConflictError, match="same job number"):
        _service(jobs).create("2024-001", "Another")


def test_job_number_match_is_case_sensitive():
    jobs = InMemoryJobs(Job(1, "abc", "Lower", "abc - Lower"))
    _service(jobs).create("ABC", "Upper")
    assert len(jobs.jobs) == 2


def test_create_requires_number_and_name():
    with pytest.raises(ValidationError, match="Job name and number are required."):
        _service().create("  ", "Name")


def test_delete_blocked_by_task_entries():
    jobs = InMemoryJobs(Job(1, "100", "Office", "100 - Office"))
    tasks = InMemoryTasks(TaskEntry(id=1, user_id=2, week_of=None, work_date=date(2025, 1, 6), job_id=1))
    with pytest.raises(ConflictError, match="associated task entries"):
        _service(jobs, tasks).delete(1)
    assert jobs.get_by_id(1) is not None


def test_delete_unreferenced_job():
    jobs = InMemoryJobs(Job(1, "100", "Office", "100 - Office"))
    _service(jobs).delete(1)
    assert jobs.jobs == {}


def test_delete_missing_job_is_not_found():
    with pytest.raises(NotFoundError):
        _service().delete(42)


def test_update_rejects_id_mismatch_and_missing_job():
    jobs = InMemoryJobs(Job(1, "100", "Office", "100 - Office"))
    service = _service(jobs)
    with pytest.raises(ValidationError):
        service.update(1, Job(2, "100", "Office"))
    with pytest.raises(NotFoundError):
        service.update(5, Job(5, "500", "Nothing"))

    updated = service.update(1, Job(1, "100", "Head Office"))
    assert updated.job_number_and_job_name == "100 - Head Office"


def test_list_page_counts_and_slices():
    jobs = InMemoryJobs(*(Job(i, f"J{i:03}", f"Job {i}") for i in range(1, 26)))
    page = _service(jobs).list_page(None, page_number=3, page_size=10)
    assert page.total_jobs == 25
    assert page.total_pages == 3
    assert [j.id for j in page.jobs] == [21, 22, 23, 24, 25]


def test_list_page_filters_on_number_or_name():
    jobs = InMemoryJobs(Job(1, "100", "Bridge"), Job(2, "200", "Road"), Job(3, "1001", "Tunnel"))
    page = _service(jobs).list_page("100")
    assert page.total_jobs == 2
    assert page.page_size == 100


def test_list_page_rejects_bad_paging():
    with pytest.raises(ValidationError):
        _service().list_page(None, page_number=0)


def test_sync_copies_missing_staged_jobs_once():
    jobs = InMemoryJobs(Job(1, "100", "Office", "100 - Office"))
    imported = InMemoryStagedJobs(JobSource.IMPORTED, ("100", "Office"), ("200", "Road"))
    created = InMemoryStagedJobs(JobSource.CREATED, ("200", "Road (user)"), ("300", "Bridge"))
    service = _service(jobs, imported=imported, created=created)

    assert service.sync_staged_jobs() == 2
    assert sorted(j.job_number for j in jobs.list_all()) == ["100", "200", "300"]
    assert jobs.get_by_number("200").job_name == "Road"
    assert service.sync_staged_jobs() == 0


def test_submit_created_stages_job():
    created = InMemoryStagedJobs(JobSource.CREATED)
    staged = _service(created=created).submit_created("900", "New Site")
    assert staged.source is JobSource.CREATED
    assert created.get_by_number("900").job_number_and_job_name == "900 - New Site"


def test_import_csv_skips_blanks_and_duplicates():
    jobs = InMemoryJobs()
    imported = InMemoryStagedJobs(JobSource.IMPORTED)
    csv_text = "JobNumber,JobName\n100,Office\n,No number\n100,Office again\n200,Road\n"

    result = _service(jobs, imported=imported).import_csv(io.StringIO(csv_text))

    assert result.rows_read == 4
    assert result.staged == 2
    assert result.synced == 2
    assert sorted(j.job_number for j in jobs.list_all()) == ["100", "200"]


def test_import_csv_requires_columns():
    with pytest.raises(ValidationError):
        _service().import_csv(io.StringIO("Number,Name\n1,x\n"))
