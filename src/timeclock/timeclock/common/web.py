"""Flask helpers shared by the API controllers."""
from __future__ import annotations

from functools import wraps
from typing import Any, Tuple

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from ..users.model import CallerIdentity
from .payload import Payload
from .serialization import to_json

AUTH_REQUIRED = "Authentication required."
ADMIN_REQUIRED = "Admin role required."

_STATUS = (
    (ValidationError, 400),
    (ConflictError, 400),
    (NotFoundError, 404),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (StorageError, 500),
)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return AUTH_REQUIRED, 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return AUTH_REQUIRED, 401
        if session.get("role") != Role.ADMIN.value:
            return ADMIN_REQUIRED, 403
        return view(*args, **kwargs)

    return wrapper


def current_caller() -> CallerIdentity:
    return CallerIdentity(user_id=int(session["user_id"]), role=Role(session.get("role", Role.USER.value)))


def request_payload() -> Payload:
    return Payload(request.get_json(silent=True))


def query_payload() -> Payload:
    return Payload(request.args.to_dict())


def json_ok(value: Any, status: int = 200):
    return jsonify(to_json(value)), status


def error_response(exc: DomainError) -> Tuple[Any, int]:
    """Plain-text body with the status the error kind maps to."""
    for kind, status in _STATUS:
        if isinstance(exc, kind):
            return str(exc), status
    return str(exc), 400
