"""End-to-end checks of the JSON API over the in-memory container."""
from __future__ import annotations

from datetime import date

from src.timeclock.timeclock.core.enums import Role
from src.timeclock.timeclock.jobs.model import Job
from src.timeclock.timeclock.main import create_app
from src.timeclock.timeclock.tasks.model import TaskEntry

from tests.fakes import InMemoryDays, InMemoryJobs, InMemoryTaskItems, InMemoryTasks, login_as, make_container


def _app_client(container):
    app = create_app(container=container, settings_module="config.testing")
    app.config["TESTING"] = True
    return app.test_client()


def test_anonymous_requests_get_401(client):
    resp = client.get("/api/Dashboard/Index")
    assert resp.status_code == 401
    assert resp.get_data(as_text=True) == "Authentication required."


def test_admin_routes_reject_plain_users(client):
    login_as(client, 2)
    resp = client.post("/api/Dashboard/AddJob", json={"JobModel": {"JobNumber": "1", "JobName": "x"}})
    assert resp.status_code == 403
    assert resp.get_data(as_text=True) == "Admin role required."


def test_clock_in_creates_entry_for_caller(client, container):
    login_as(client, 2)
    resp = client.post(
        "/api/Dashboard/ClockInOut",
        json={"DayEntry": {"Date": "2025-01-09", "DayStartTime": "08:00"}},
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Clock In/Out successful"}

    (entry,) = container.days_repo.rows.values()
    assert entry.user_id == 2
    assert entry.week_of == date(2025, 1, 5)
    assert entry.day_name == "Thursday"


def test_clock_without_entry_is_400(client):
    login_as(client, 2)
    resp = client.post("/api/Dashboard/ClockInOut", json={})
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "DayEntry is required."


def test_task_entry_add_and_delete(client, container):
    login_as(client, 2)
    resp = client.post(
        "/api/Dashboard/AddTaskEntry",
        json={"TaskEntry": {"Date": "2025-01-09", "TaskName": "Design", "Duration": 2.5}},
    )
    assert resp.get_data(as_text=True) == "Task entry added/updated successfully"

    (entry_id,) = container.tasks_repo.rows
    resp = client.delete(f"/api/Dashboard/DeleteTaskEntry/{entry_id}")
    assert resp.get_data(as_text=True) == "Task entry deleted successfully."

    resp = client.delete(f"/api/Dashboard/DeleteTaskEntry/{entry_id}")
    assert resp.status_code == 404


def test_users_cannot_delete_other_users_entries():
    tasks = InMemoryTasks(TaskEntry(id=1, user_id=3, week_of=date(2025, 1, 5), work_date=date(2025, 1, 9), task_name="Design"))
    client = _app_client(make_container(tasks=tasks))
    login_as(client, 2)
    assert client.delete("/api/Dashboard/DeleteTaskEntry/1").status_code == 403


def test_add_job_rejects_duplicate_number():
    client = _app_client(make_container(jobs=InMemoryJobs(Job(1, "100", "Tower", "100 - Tower"))))
    login_as(client, 1, Role.ADMIN)
    resp = client.post("/api/Dashboard/AddJob", json={"JobModel": {"JobNumber": "100", "JobName": "Other"}})
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "A job with the same job number already exists."


def test_export_timesheet_is_csv_attachment(client):
    login_as(client, 1, Role.ADMIN)
    resp = client.get("/api/Dashboard/ExportTimeSheet?group=Group1")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    disposition = resp.headers["Content-Disposition"]
    assert "attachment" in disposition
    assert "timesheet_Group1_" in disposition
    assert resp.get_data(as_text=True).startswith("Employee,Email,Group,Date,Job,Task,Duration,Comment")


def test_export_timesheet_requires_group(client):
    login_as(client, 1, Role.ADMIN)
    resp = client.get("/api/Dashboard/ExportTimeSheet")
    assert resp.status_code == 400


def test_job_page_shape():
    jobs = InMemoryJobs(*(Job(i, str(100 + i), f"Job {i}") for i in range(1, 6)))
    client = _app_client(make_container(jobs=jobs))
    login_as(client, 2)
    body = client.get("/api/Jobs?pageNumber=2&pageSize=2").get_json()
    assert body["totalJobs"] == 5
    assert body["pageNumber"] == 2
    assert body["pageSize"] == 2
    assert body["totalPages"] == 3
    assert [j["jobNumber"] for j in body["jobs"]] == ["103", "104"]


def test_bad_page_number_is_400(client):
    login_as(client, 2)
    assert client.get("/api/Jobs?pageNumber=0").status_code == 400


def test_task_catalog_endpoints(client):
    login_as(client, 1, Role.ADMIN)
    created = client.post("/api/Tasks", json={"TaskDescription": "Review"})
    assert created.status_code == 201
    assert created.get_json() == {"id": 3, "taskDescription": "Review"}

    assert client.delete("/api/Tasks/3").status_code == 204
    assert client.get("/api/Tasks/3").status_code == 404


def test_task_catalog_write_failure_is_500():
    client = _app_client(make_container(task_items=InMemoryTaskItems(fail_writes=True)))
    login_as(client, 1, Role.ADMIN)
    resp = client.post("/api/Tasks", json={"TaskDescription": "Review"})
    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Unable to create task."


class _BrokenDays(InMemoryDays):
    def list_for_user_week(self, user_id, week_of):
        raise RuntimeError("database went away")


def test_dashboard_unexpected_error_is_500():
    client = _app_client(make_container(days=_BrokenDays()))
    login_as(client, 2)
    resp = client.get("/api/Dashboard/Index")
    assert resp.status_code == 500
    assert resp.get_data(as_text=True) == "Internal Server Error: database went away"


def test_dashboard_for_employee(client):
    login_as(client, 2)
    body = client.get("/api/Dashboard/Index?WeekSelect=2025-01-05").get_json()
    assert body["currentUserId"] == 2
    assert body["isAdmin"] is False
    assert body["weekSelect"] == "2025-01-05"
    assert [t["taskDescription"] for t in body["tasks"]] == ["Design", "Drafting"]
    assert body["groups"] == []


def test_non_object_body_is_400(client):
    login_as(client, 2)
    resp = client.post("/api/Dashboard/ClockInOut", json=[1, 2])
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "Request body must be a JSON object."

    resp = client.post("/api/Account/Login", json=["user2@test.com"])
    assert resp.status_code == 400
