from __future__ import annotations

import pytest

from src.timeclock.timeclock.core.enums import Role
from src.timeclock.timeclock.core.exceptions import AuthenticationError, ValidationError
from src.timeclock.timeclock.users.service import AccountService, AuthService, RegistrationForm

from tests.fakes import PASSWORD, InMemoryUsers, make_user


def _form(**overrides) -> RegistrationForm:
    values = dict(
        email_address="new@test.com",
        password="secret1",
        confirm_password="secret1",
        first_name="New",
        last_name="Person",
        employee_number="4242",
        group="Group1",
    )
    values.update(overrides)
    return RegistrationForm(**values)


def test_wrong_password_raises():
    users = InMemoryUsers(make_user(2))
    with pytest.raises(AuthenticationError, match="Wrong credentials"):
        AuthService(users).authenticate("user2@test.com", "nope")


def test_login_returns_session_user():
    users = InMemoryUsers(make_user(1, role=Role.ADMIN))
    s_user = AuthService(users).authenticate("user1@test.com", PASSWORD)
    assert s_user.user_id == 1
    assert s_user.is_admin


def test_register_creates_plain_user():
    users = InMemoryUsers()
    user_id = AccountService(users).register(_form())
    user = users.get_by_id(user_id)
    assert user.role is Role.USER
    assert user.employee_number == 4242
    assert user.password_hash != "secret1"


def test_register_collects_field_errors():
    with pytest.raises(ValidationError) as exc:
        AccountService(InMemoryUsers()).register(
            _form(confirm_password="other", first_name="", employee_number="abc", password="123")
        )
    errors = exc.value.errors
    assert errors["ConfirmPassword"] == ["Password do not match"]
    assert "FirstName" in errors
    assert "EmployeeNumber" in errors
    assert "Password" in errors


def test_register_rejects_taken_email():
    users = InMemoryUsers(make_user(2))
    with pytest.raises(ValidationError, match="This email address is already in use"):
        AccountService(users).register(_form(email_address="user2@test.com"))
