"""Todo items scoped to a user."""

from __future__ import annotations

import datetime as dt
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Todo(SQLModel, table=True):
    """A dated todo that can be ticked off."""

    __tablename__: ClassVar[str] = "todos"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    date: dt.date = Field(default_factory=dt.date.today, nullable=False, index=True)
    is_completed: bool = Field(default=False, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "date": self.date.isoformat(),
            "is_completed": self.is_completed,
        }
