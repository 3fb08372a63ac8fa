from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.enums import ErrorCode, Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError
from ..workers.model import Identity

logger = logging.getLogger(__name__)

HTTP_STATUS = {
    ErrorCode.VALIDATION: 400,
    ErrorCode.UNAUTHENTICATED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.ALREADY_CLOCKED_IN: 409,
    ErrorCode.NO_OPEN_SHIFT: 409,
    ErrorCode.NOT_IN_PERIMETER: 422,
    ErrorCode.STORAGE_TIMEOUT: 503,
    ErrorCode.INTERNAL: 500,
}


def current_identity() -> Identity:
    """Identity carried by the signed session cookie.

    The identity layer writes these keys after verifying the worker's
    credential; plain request headers are never consulted.
    """

    worker_id = session.get("worker_id")
    if not worker_id:
        raise AuthenticationError("Please sign in to continue")
    try:
        role = Role(session.get("role"))
    except ValueError:
        raise AuthenticationError("Session carries no valid role") from None

    return Identity(
        worker_id=str(worker_id),
        role=role,
        email=session.get("email") or "",
        display_name=session.get("name") or "",
    )


def require_manager(identity: Identity) -> Identity:
    if identity.role != Role.MANAGER:
        raise AuthorizationError("Manager role required")
    return identity


def error_response(e: DomainError):
    body = {"error": {"code": e.code.value, "message": str(e), "retryable": e.retryable}}
    return jsonify(body), HTTP_STATUS.get(e.code, 500)


def json_endpoint(view):
    """Render DomainError as a JSON error body; log anything unexpected."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            body = {"error": {"code": ErrorCode.INTERNAL.value, "message": "Internal server error", "retryable": False}}
            return jsonify(body), 500

    return wrapper
