"""Habits tracking data structures."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class HabitFrequency(str, Enum):
    """Supported cadence options for habits."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


class Habit(SQLModel, table=True):
    """A user-defined habit with a progress counter towards a target."""

    __tablename__: ClassVar[str] = "habits"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    completed: int = Field(default=0, nullable=False)
    to_complete: int = Field(default=1, nullable=False)
    status: str = Field(default="ACTIVE", nullable=False, max_length=32)
    freq: str = Field(default=HabitFrequency.DAILY.value, nullable=False, max_length=16)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "completed": self.completed,
            "to_complete": self.to_complete,
            "status": self.status,
            "freq": self.freq,
        }
