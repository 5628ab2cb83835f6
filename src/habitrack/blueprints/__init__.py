"""Blueprint exports."""

from . import auth, habits, home, todos, users

__all__ = [
    "auth",
    "habits",
    "home",
    "todos",
    "users",
]
