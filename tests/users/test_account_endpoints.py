from __future__ import annotations

from src.timeclock.timeclock.core.enums import Role

from tests.fakes import PASSWORD, login_as


def test_login_success_sets_session(client):
    resp = client.post("/api/Account/Login", json={"EmailAddress": "user1@test.com", "Password": PASSWORD})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body == {"message": "Login successful", "userId": 1, "roles": ["admin"], "isAdmin": True}
    with client.session_transaction() as sess:
        assert sess["user_id"] == 1


def test_login_failure_is_401(client):
    resp = client.post("/api/Account/Login", json={"emailAddress": "user1@test.com", "password": "bad"})
    assert resp.status_code == 401
    assert resp.get_data(as_text=True) == "Wrong credentials. Please try again."


def test_register_then_duplicate(client):
    payload = {
        "EmailAddress": "fresh@test.com",
        "Password": "secret1",
        "ConfirmPassword": "secret1",
        "FirstName": "Fresh",
        "LastName": "Hire",
        "EmployeeNumber": "77",
        "Group": "Group1",
    }
    ok = client.post("/api/Account/Register", json=payload)
    assert ok.status_code == 200
    assert ok.get_data(as_text=True) == "Registration successful. You can now log in."

    dup = client.post("/api/Account/Register", json=payload)
    assert dup.status_code == 400
    assert dup.get_data(as_text=True) == "This email address is already in use"


def test_register_field_errors_are_json(client):
    resp = client.post("/api/Account/Register", json={"EmailAddress": "x@test.com"})
    assert resp.status_code == 400
    assert "Password" in resp.get_json()["errors"]


def test_logout_clears_session(client):
    login_as(client, 2)
    resp = client.post("/api/Account/Logout")
    assert resp.get_json() == {"message": "Logged out successfully"}
    with client.session_transaction() as sess:
        assert "user_id" not in sess


def test_admin_user_list_requires_admin(client):
    assert client.get("/api/Admin").status_code == 401
    login_as(client, 2)
    assert client.get("/api/Admin").status_code == 403
    login_as(client, 1, Role.ADMIN)
    users = client.get("/api/Admin").get_json()
    assert {u["userId"] for u in users} == {1, 2, 3}
    assert all("passwordHash" not in u for u in users)
