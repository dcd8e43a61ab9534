from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import AppUser


class UserRepository(Protocol):
    """Repository interface for AppUser.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: int) -> Optional[AppUser]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[AppUser]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        employee_number: int,
        group: str,
        role: Role,
    ) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[AppUser]:
        raise NotImplementedError

    def list_by_group(self, group: str) -> Sequence[AppUser]:
        raise NotImplementedError
