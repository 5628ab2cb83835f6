"""Request authentication and ownership checks."""

from __future__ import annotations

from functools import wraps
from typing import Callable

from flask import g, request

from .errors import AccessDenied, Unauthorized, error_response
from .extensions import get_config, get_session_store
from .logging_config import get_logger
from .services.sessions import SessionIdentity

logger = get_logger("security")


def authenticate_request():
    """Resolve the ``TOKEN`` header to an identity.

    Returns an error response for missing or unknown tokens, otherwise stores
    the identity on ``g.current_user`` and returns None. Usable directly as a
    blueprint ``before_request`` hook.
    """

    token = request.headers.get(get_config().TOKEN_HEADER, "").strip()
    if not token:
        return error_response(Unauthorized("Missing token"))
    identity = get_session_store().get(token)
    if identity is None:
        logger.info("Rejected unknown token", extra={"path": request.path})
        return error_response(Unauthorized("Invalid token"))
    g.current_user = identity
    g.session_token = token
    return None


def token_required(view: Callable) -> Callable:
    """Decorator form of ``authenticate_request`` for individual views."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        failure = authenticate_request()
        if failure is not None:
            return failure
        return view(*args, **kwargs)

    return wrapped


def current_user() -> SessionIdentity:
    return g.current_user


def ensure_owner(owner_id: int) -> None:
    """Raise ``AccessDenied`` unless the caller is ``owner_id``."""

    caller = current_user()
    if owner_id != caller.id:
        logger.warning(
            "Access denied",
            extra={"caller_id": caller.id, "owner_id": owner_id, "path": request.path},
        )
        raise AccessDenied()


__all__ = ["authenticate_request", "current_user", "ensure_owner", "token_required"]
