from __future__ import annotations

from datetime import date
from enum import Enum, IntEnum


class Role(str, Enum):
    """Role used for authorization checks."""

    ADMIN = "admin"
    USER = "user"


class Weekday(IntEnum):
    """Day of week numbered from Sunday, the way the week buckets are keyed."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, value: date) -> "Weekday":
        return cls(value.isoweekday() % 7)

    @classmethod
    def parse(cls, name: str) -> "Weekday":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday: {name!r}") from None

    @property
    def label(self) -> str:
        return self.name.capitalize()


class JobSource(str, Enum):
    """Staging table a job came from before it reached the job catalog."""

    IMPORTED = "imported"
    CREATED = "created"
