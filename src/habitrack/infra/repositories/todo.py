"""SQLModel implementation of Todo repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.todo import Todo


class SQLModelTodoRepository:
    """SQLModel-based todo repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, todo_id: int, *, user_id: int) -> Optional[Todo]:
        """Retrieve a todo by ID."""
        with self.session_factory() as session:
            obj = session.exec(
                select(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: int) -> list[Todo]:
        """List todos owned by the user, oldest date first."""
        with self.session_factory() as session:
            statement = (
                select(Todo)
                .where(Todo.user_id == user_id)
                .order_by(Todo.date, Todo.id)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, todo: Todo, *, user_id: int) -> Todo:
        """Create a new todo."""
        with self.session_factory() as session:
            todo.user_id = user_id
            session.add(todo)
            session.commit()
            session.refresh(todo)
            session.expunge(todo)
            return todo

    def update(self, todo: Todo, *, user_id: int) -> Todo:
        """Update an existing todo."""
        with self.session_factory() as session:
            todo.user_id = user_id
            session.add(todo)
            session.commit()
            session.refresh(todo)
            session.expunge(todo)
            return todo

    def delete(self, todo_id: int, *, user_id: int) -> None:
        """Delete a todo by ID."""
        with self.session_factory() as session:
            todo = session.exec(
                select(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
            ).first()
            if todo:
                session.delete(todo)
                session.commit()

    def toggle(self, todo_id: int, *, user_id: int) -> Optional[Todo]:
        """Flip ``is_completed`` in a single session; None when not owned."""
        with self.session_factory() as session:
            todo = session.exec(
                select(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
            ).first()
            if todo is None:
                return None
            todo.is_completed = not todo.is_completed
            session.add(todo)
            session.commit()
            session.refresh(todo)
            session.expunge(todo)
            return todo
