"""User model supporting authentication and profile stats."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """Account holder owning habits and todos."""

    __tablename__: ClassVar[str] = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    email: str = Field(nullable=False, unique=True, index=True, max_length=255)
    password_hash: str = Field(nullable=False, max_length=255)
    avatar_id: int = Field(default=1, nullable=False)
    health: int = Field(default=0, nullable=False)
    experience: int = Field(default=0, nullable=False)
    level: int = Field(default=0, nullable=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def public_dict(self) -> dict:
        """Return the profile without credential fields."""

        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "avatar_id": self.avatar_id,
            "health": self.health,
            "experience": self.experience,
            "level": self.level,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
