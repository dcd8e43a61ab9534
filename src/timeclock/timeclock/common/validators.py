from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_text(value: Optional[str], message: str) -> str:
    """Trimmed value, or ValidationError(message) when blank."""
    value = (value or "").strip()
    if not value:
        raise ValidationError(message)
    return value


def require_at_least(value: int, field_name: str, minimum: int = 1) -> int:
    if value < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum}.")
    return value
