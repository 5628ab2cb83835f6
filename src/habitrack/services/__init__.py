"""Service module exports."""

from . import auth, habits, sessions, users

__all__ = [
    "auth",
    "habits",
    "sessions",
    "users",
]
