"""Request payload access.

JSON bodies from the dashboard client use PascalCase or camelCase keys
interchangeably, so lookups here ignore key case.
"""
from __future__ import annotations

from datetime import date, time
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_date_value, parse_time_value


class Payload:
    def __init__(self, data: Optional[Mapping[str, Any]]):
        if data is not None and not isinstance(data, Mapping):
            raise ValidationError("Request body must be a JSON object.")
        self._data = {str(k).lower(): v for k, v in (data or {}).items()}

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str, default: Any = None) -> Any:
        value = self._data.get(key.lower(), default)
        return default if value is None else value

    def section(self, key: str) -> Optional["Payload"]:
        value = self.get(key)
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise ValidationError(f"{key} must be an object.")
        return Payload(value)

    def get_str(self, key: str) -> Optional[str]:
        value = self.get(key)
        return None if value is None else str(value)

    def get_int(self, key: str, default: int = 0) -> int:
        value = self.get(key)
        if value in (None, ""):
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{key} must be an integer.") from None

    def get_optional_int(self, key: str) -> Optional[int]:
        value = self.get(key)
        if value in (None, ""):
            return None
        return self.get_int(key)

    def get_float(self, key: str) -> Optional[float]:
        value = self.get(key)
        if value in (None, ""):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValidationError(f"{key} must be a number.") from None

    def get_date(self, key: str) -> Optional[date]:
        value = self.get(key)
        if value in (None, ""):
            return None
        try:
            return parse_date_value(str(value))
        except ValueError:
            raise ValidationError(f"{key} is not a valid date.") from None

    def get_time(self, key: str) -> Optional[time]:
        value = self.get(key)
        if value in (None, ""):
            return None
        try:
            return parse_time_value(str(value))
        except ValueError:
            raise ValidationError(f"{key} is not a valid time.") from None
