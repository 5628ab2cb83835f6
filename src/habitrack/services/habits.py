"""Habit progress rules."""

from __future__ import annotations

from typing import Any

from ..models.habit import Habit, HabitFrequency


def clamp_progress(completed: int, to_complete: int) -> int:
    """Progress never exceeds the target."""

    return min(completed, to_complete)


def build_habit(
    *,
    name: str,
    completed: int = 0,
    to_complete: int = 1,
    status: str = "ACTIVE",
    freq: HabitFrequency | str = HabitFrequency.DAILY,
) -> Habit:
    """Return an unsaved habit with clamped progress; ``user_id`` is set on create."""

    return Habit(
        name=name,
        completed=clamp_progress(completed, to_complete),
        to_complete=to_complete,
        status=status,
        freq=HabitFrequency(freq).value,
    )


def apply_habit_changes(habit: Habit, changes: dict[str, Any]) -> Habit:
    """Apply a partial update in place.

    ``completed`` is re-clamped against the effective target, so lowering
    ``to_complete`` alone also pulls progress down.
    """

    if "name" in changes:
        habit.name = changes["name"]
    if "status" in changes:
        habit.status = changes["status"]
    if "freq" in changes:
        habit.freq = HabitFrequency(changes["freq"]).value

    to_complete = changes.get("to_complete", habit.to_complete)
    completed = changes.get("completed", habit.completed)
    habit.to_complete = to_complete
    habit.completed = clamp_progress(completed, to_complete)
    return habit


__all__ = ["apply_habit_changes", "build_habit", "clamp_progress"]
