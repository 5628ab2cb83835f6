"""Habit form definitions."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, ValidationInfo, field_validator, model_validator

from ...forms import INT_MAX, ApiForm, reject_null
from ...models.habit import HabitFrequency


def _upper(value):
    return value.strip().upper() if isinstance(value, str) else value


class HabitForm(ApiForm):
    """Payload for creating a habit."""

    name: Optional[str] = Field(default=None, description="Short label for the habit", max_length=255)
    completed: int = Field(default=0, ge=0, le=INT_MAX, description="Progress towards the target")
    to_complete: int = Field(default=1, ge=1, le=INT_MAX, description="Completions needed per period")
    status: str = Field(default="ACTIVE", min_length=1, max_length=32)
    freq: HabitFrequency = Field(default=HabitFrequency.DAILY, description="Habit frequency")

    @model_validator(mode="after")
    def validate_name(self) -> "HabitForm":
        """Ensure the habit name is present."""

        if not self.name:
            raise ValueError("Please provide a habit name.")
        return self

    @field_validator("freq", mode="before")
    @classmethod
    def normalize_freq(cls, value):
        return _upper(value)


class HabitUpdateForm(ApiForm):
    """Partial habit update; omitted fields keep their stored values."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    completed: Optional[int] = Field(default=None, ge=0, le=INT_MAX)
    to_complete: Optional[int] = Field(default=None, ge=1, le=INT_MAX)
    status: Optional[str] = Field(default=None, min_length=1, max_length=32)
    freq: Optional[HabitFrequency] = None

    @field_validator("name", "completed", "to_complete", "status", "freq", mode="before")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)

    @field_validator("freq", mode="before")
    @classmethod
    def normalize_freq(cls, value):
        return _upper(value)


__all__ = ["HabitForm", "HabitUpdateForm"]
