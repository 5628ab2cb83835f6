"""Shared request-form plumbing for the JSON API."""

from __future__ import annotations

import re
from typing import Any, Optional

from flask import request
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic import ValidationInfo

from .errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_MIN_LENGTH = 6
# Range of a SQLite INTEGER column.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def read_json_body() -> Any:
    """Return the decoded JSON body, or ``{}`` when the request has none."""

    payload = request.get_json(silent=True)
    return {} if payload is None else payload


def _first_message(exc: PydanticValidationError) -> str:
    error = exc.errors(include_url=False)[0]
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    loc = ".".join(str(part) for part in error.get("loc", ()))
    msg = error.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


def check_email(value: Optional[str]) -> Optional[str]:
    if value and not EMAIL_PATTERN.match(value):
        raise ValueError("Invalid email format")
    return value


def check_password(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value) < PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    return value


def reject_null(value: Any, info: ValidationInfo) -> Any:
    """``before`` validator for partial updates: present fields may not be null."""

    if value is None:
        raise ValueError(f"{info.field_name} cannot be null")
    return value


class ApiForm(BaseModel):
    """Base form: whitespace-stripped strings, unknown keys ignored."""

    model_config = ConfigDict(str_strip_whitespace=True)

    @classmethod
    def parse(cls, payload: Any):
        """Validate ``payload`` or raise the API ``ValidationError``."""

        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(_first_message(exc)) from exc

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent, for partial updates."""

        return self.model_dump(exclude_unset=True)


__all__ = [
    "ApiForm",
    "EMAIL_PATTERN",
    "INT_MAX",
    "INT_MIN",
    "PASSWORD_MIN_LENGTH",
    "check_email",
    "check_password",
    "read_json_body",
    "reject_null",
]
