"""Repository protocol definitions for domain layer."""

from .habit import HabitRepository
from .todo import TodoRepository
from .user import UserRepository

__all__ = [
    "HabitRepository",
    "TodoRepository",
    "UserRepository",
]
