"""Registration and login form definitions."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator, model_validator

from ...forms import INT_MAX, INT_MIN, ApiForm, check_email, check_password


class RegisterForm(ApiForm):
    """Payload for ``POST /register``."""

    name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = None
    avatar_id: int = Field(default=1, ge=INT_MIN, le=INT_MAX)
    health: int = Field(default=0, ge=INT_MIN, le=INT_MAX)
    experience: int = Field(default=0, ge=INT_MIN, le=INT_MAX)
    level: int = Field(default=0, ge=INT_MIN, le=INT_MAX)

    @model_validator(mode="after")
    def require_credentials(self) -> "RegisterForm":
        if not (self.name and self.email and self.password):
            raise ValueError("Name, email and password are required")
        check_email(self.email)
        check_password(self.password)
        return self


class LoginForm(ApiForm):
    """Payload for ``POST /login``."""

    email: str = ""
    password: str = ""

    @field_validator("email", "password", mode="before")
    @classmethod
    def coerce_missing(cls, value):
        return "" if value is None else value


__all__ = ["LoginForm", "RegisterForm"]
