"""SQLModel implementation of User repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import delete
from sqlmodel import Session, select

from ...models.habit import Habit
from ...models.todo import Todo
from ...models.user import User


class SQLModelUserRepository:
    """SQLModel-based user repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Retrieve a user by ID."""
        with self.session_factory() as session:
            obj = session.get(User, user_id)
            if obj:
                session.expunge(obj)
            return obj

    def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email address."""
        with self.session_factory() as session:
            obj = session.exec(select(User).where(User.email == email)).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self) -> list[User]:
        """List every user ordered by id."""
        with self.session_factory() as session:
            rows = list(session.exec(select(User).order_by(User.id)).all())  # type: ignore
            session.expunge_all()
            return rows

    def create(self, user: User) -> User:
        """Create a new user."""
        with self.session_factory() as session:
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user

    def update(self, user: User) -> User:
        """Update an existing user."""
        with self.session_factory() as session:
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user

    def delete(self, user_id: int) -> None:
        """Delete a user and every habit and todo they own."""
        with self.session_factory() as session:
            user = session.get(User, user_id)
            if user is None:
                return
            session.execute(delete(Habit).where(Habit.user_id == user_id))
            session.execute(delete(Todo).where(Todo.user_id == user_id))
            session.delete(user)
            session.commit()
