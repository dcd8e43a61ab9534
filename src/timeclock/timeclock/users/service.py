from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from .model import AppUser, CallerIdentity
from .repository import UserRepository

logger = logging.getLogger(__name__)

WRONG_CREDENTIALS = "Wrong credentials. Please try again."


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: int
    full_name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


@dataclass(frozen=True)
class RegistrationForm:
    email_address: Optional[str]
    password: Optional[str]
    confirm_password: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    employee_number: Optional[str]
    group: Optional[str]


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email((email or "").strip())
        if not user or not user.is_active:
            logger.info("Login rejected for unknown or inactive account %s", email)
            raise AuthenticationError(WRONG_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.info("Login rejected for %s: bad password", email)
            raise AuthenticationError(WRONG_CREDENTIALS)

        return SessionUser(user_id=user.user_id, full_name=user.full_name, role=user.role)


class AccountService:
    """Use case: self-service registration."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, form: RegistrationForm) -> int:
        errors: dict[str, list[str]] = {}

        def need(field: str, value: Optional[str], message: str) -> str:
            value = (value or "").strip()
            if not value:
                errors.setdefault(field, []).append(message)
            return value

        email = need("EmailAddress", form.email_address, "Email address is required")
        password = form.password or ""
        if not password:
            errors.setdefault("Password", []).append("Password is required")
        elif len(password) < MIN_PASSWORD_LENGTH:
            errors.setdefault("Password", []).append(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if not form.confirm_password:
            errors.setdefault("ConfirmPassword", []).append("Confirm password is required")
        elif form.confirm_password != password:
            errors.setdefault("ConfirmPassword", []).append("Password do not match")

        first_name = need("FirstName", form.first_name, "First name is required")
        last_name = need("LastName", form.last_name, "Last name is required")
        group = need("Group", form.group, "Group is required")

        employee_number: Optional[int] = None
        raw_number = need("EmployeeNumber", form.employee_number, "Employee number is required")
        if raw_number:
            try:
                employee_number = int(raw_number)
            except ValueError:
                errors.setdefault("EmployeeNumber", []).append("Employee number must be a number")

        if errors:
            raise ValidationError("Registration failed.", errors)

        if self._users.get_by_email(email):
            raise ValidationError("This email address is already in use")

        user_id = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            first_name=first_name,
            last_name=last_name,
            employee_number=int(employee_number),
            group=group,
            role=Role.USER,
        )
        logger.info("Registered user %s (id=%s, group=%s)", email, user_id, group)
        return user_id


class UserService:
    """Use case: user listings for admins and the dashboard."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: int) -> Optional[AppUser]:
        return self._users.get_by_id(int(user_id))

    def list_users(self, caller: CallerIdentity) -> Sequence[AppUser]:
        if not caller.is_admin:
            raise AuthorizationError("Admin role required.")
        return self._users.list_all()

    def list_groups(self) -> list[str]:
        groups = {u.group for u in self._users.list_all() if u.group and u.group.strip()}
        return sorted(groups)

    def list_by_group(self, group: str) -> Sequence[AppUser]:
        return self._users.list_by_group(group)


def ensure_can_edit(caller: CallerIdentity, user_id: Optional[int]) -> None:
    if not caller.can_edit(user_id):
        raise AuthorizationError("You can only change your own entries.")
