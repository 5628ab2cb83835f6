"""Profile update form."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, ValidationInfo, field_validator

from ...forms import INT_MAX, INT_MIN, ApiForm, check_email, check_password, reject_null


class UserUpdateForm(ApiForm):
    """Partial update for ``PUT /users/<id>``; omitted fields are left alone."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, min_length=1, max_length=255)
    password: Optional[str] = None
    avatar_id: Optional[int] = Field(default=None, ge=INT_MIN, le=INT_MAX)
    health: Optional[int] = Field(default=None, ge=INT_MIN, le=INT_MAX)
    experience: Optional[int] = Field(default=None, ge=INT_MIN, le=INT_MAX)
    level: Optional[int] = Field(default=None, ge=INT_MIN, le=INT_MAX)

    @field_validator(
        "name", "email", "password", "avatar_id", "health", "experience", "level", mode="before"
    )
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Optional[str]) -> Optional[str]:
        return check_email(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: Optional[str]) -> Optional[str]:
        return check_password(value)


__all__ = ["UserUpdateForm"]
