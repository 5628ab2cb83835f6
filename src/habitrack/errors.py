"""API error taxonomy and the JSON error envelope."""

from __future__ import annotations

from functools import wraps
from typing import Callable

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from .logging_config import get_logger

logger = get_logger("errors")


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(ApiError):
    status_code = 400
    message = "Invalid request"


class EmailTaken(ValidationError):
    message = "Email already in use"


class Unauthorized(ApiError):
    status_code = 401
    message = "Unauthorized"


class InvalidCredentials(Unauthorized):
    message = "Invalid email or password"


class AccessDenied(ApiError):
    status_code = 403
    message = "Access denied"


class NotFound(ApiError):
    status_code = 404
    message = "Not found"


class InternalError(ApiError):
    pass


def error_response(error: ApiError):
    """Render an ``ApiError`` as ``({"error": ...}, status)``."""

    return jsonify({"error": error.message}), error.status_code


def handle_api_errors(view: Callable) -> Callable:
    """Convert failures raised inside a view into the JSON error envelope."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ApiError as exc:
            return error_response(exc)
        except SQLAlchemyError:
            logger.exception("Store failure in %s", view.__name__)
            return error_response(InternalError())
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return error_response(InternalError())

    return wrapped


def register_error_handlers(app: Flask) -> None:
    """Render framework-level HTTP errors (unknown route, bad method) as JSON."""

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return jsonify({"error": exc.description or exc.name}), exc.code


__all__ = [
    "AccessDenied",
    "ApiError",
    "EmailTaken",
    "InternalError",
    "InvalidCredentials",
    "NotFound",
    "Unauthorized",
    "ValidationError",
    "error_response",
    "handle_api_errors",
    "register_error_handlers",
]
