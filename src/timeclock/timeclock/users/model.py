from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class AppUser:
    """Domain entity: an employee account.

    Note: Plain data object, no DB access code here.
    """

    user_id: int
    email: str
    password_hash: str = field(repr=False)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    employee_number: Optional[int] = None
    group: Optional[str] = None
    role: Role = Role.USER
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


@dataclass(frozen=True)
class CallerIdentity:
    """Who is making the current request, passed explicitly into services."""

    user_id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def can_edit(self, user_id: Optional[int]) -> bool:
        """Admins edit anyone's entries; everyone else only their own."""
        return self.is_admin or user_id is None or int(user_id) == self.user_id
