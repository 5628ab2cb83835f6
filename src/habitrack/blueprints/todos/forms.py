"""Todo form definitions."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import Field, ValidationInfo, field_validator, model_validator

from ...forms import ApiForm, reject_null


class TodoForm(ApiForm):
    """Payload for creating a todo; ``date`` defaults to today."""

    name: Optional[str] = Field(default=None, max_length=255)
    date: dt.date = Field(default_factory=dt.date.today)
    is_completed: bool = False

    @model_validator(mode="after")
    def validate_name(self) -> "TodoForm":
        if not self.name:
            raise ValueError("Please provide a todo name.")
        return self


class TodoUpdateForm(ApiForm):
    """Partial todo update."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    date: Optional[dt.date] = None
    is_completed: Optional[bool] = None

    @field_validator("name", "date", "is_completed", mode="before")
    @classmethod
    def not_null(cls, value, info: ValidationInfo):
        return reject_null(value, info)


__all__ = ["TodoForm", "TodoUpdateForm"]
