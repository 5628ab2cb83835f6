"""Concrete repository implementations using SQLModel."""

from .habit import SQLModelHabitRepository
from .todo import SQLModelTodoRepository
from .user import SQLModelUserRepository

__all__ = [
    "SQLModelHabitRepository",
    "SQLModelTodoRepository",
    "SQLModelUserRepository",
]
