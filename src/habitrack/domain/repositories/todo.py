"""Todo repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.todo import Todo


class TodoRepository(Protocol):
    """Repository for managing todo entities."""

    def get_by_id(self, todo_id: int, *, user_id: int) -> Optional[Todo]:
        """Retrieve a todo by ID."""
        ...

    def list_all(self, *, user_id: int) -> list[Todo]:
        """List all todos owned by the user."""
        ...

    def create(self, todo: Todo, *, user_id: int) -> Todo:
        """Create a new todo."""
        ...

    def update(self, todo: Todo, *, user_id: int) -> Todo:
        """Update an existing todo."""
        ...

    def delete(self, todo_id: int, *, user_id: int) -> None:
        """Delete a todo by ID."""
        ...

    def toggle(self, todo_id: int, *, user_id: int) -> Optional[Todo]:
        """Flip the completion flag of a todo."""
        ...
