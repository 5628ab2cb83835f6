"""SQLModel table exports."""

from .habit import Habit, HabitFrequency
from .todo import Todo
from .user import User

__all__ = [
    "Habit",
    "HabitFrequency",
    "Todo",
    "User",
]
