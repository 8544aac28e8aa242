from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import Flask, current_app, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, ValidationError

logger = logging.getLogger(__name__)


def json_body(default: Any = None) -> Any:
    """Parsed JSON body, or ``default`` (``{}``) when the body is missing or not JSON."""
    data = request.get_json(silent=True)
    if data is None:
        return {} if default is None else default
    return data


def json_object() -> dict:
    """JSON body of an endpoint that expects an object; ``{}`` when the body is missing."""
    data = json_body()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def acting_teacher_id(requested: Any) -> Any:
    """Teacher id a write is attributed to.

    With ``AUTH_REQUIRED`` on, a logged-in teacher always acts as themselves, so
    the assignment checks run against the session user. Admins act for any teacher.
    """
    if not current_app.config.get("AUTH_REQUIRED", False):
        return requested
    if session.get("role") != Role.TEACHER.value:
        return requested

    own_id = session.get("user_id")
    if requested not in (None, "") and str(requested).strip() != str(own_id):
        raise AuthorizationError("You can only record entries as yourself")
    return own_id


def role_required(*roles: Role, owner_arg: str | None = None):
    """Guard a route by session role when ``AUTH_REQUIRED`` is on.

    ``owner_arg`` names the URL argument holding a student id: a logged-in
    student may only read their own records.
    """

    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not current_app.config.get("AUTH_REQUIRED", False):
                return view(*args, **kwargs)

            if "user_id" not in session:
                raise AuthenticationError("Please log in to continue")

            role = session.get("role")
            if role not in allowed:
                raise AuthorizationError("You do not have permission for this action")

            if owner_arg and role == Role.STUDENT.value:
                if str(kwargs.get(owner_arg)) != str(session.get("user_id")):
                    raise AuthorizationError("You do not have permission for this action")

            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = role_required(Role.ADMIN)
teacher_required = role_required(Role.TEACHER, Role.ADMIN)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.error("Unhandled error on %s %s: %s", request.method, request.path, e, exc_info=True)
        if bool(app.config.get("DEBUG", False)):
            return jsonify({"error": f"Internal server error: {e}"}), 500
        return jsonify({"error": "Internal server error"}), 500
