"""Habit routes, scoped to the authenticated caller."""

from __future__ import annotations

from flask import jsonify

from ...domain.repositories import HabitRepository
from ...errors import NotFound, handle_api_errors
from ...extensions import get_session_factory
from ...forms import read_json_body
from ...infra.repositories.habit import SQLModelHabitRepository
from ...models.habit import Habit
from ...security import authenticate_request, current_user
from ...services.habits import apply_habit_changes, build_habit
from . import bp
from .forms import HabitForm, HabitUpdateForm

bp.before_request(authenticate_request)


def _repo() -> HabitRepository:
    return SQLModelHabitRepository(get_session_factory())


def _load_habit(repo: HabitRepository, habit_id: int) -> Habit:
    # Scoped lookup: another user's habit is indistinguishable from a missing one.
    habit = repo.get_by_id(habit_id, user_id=current_user().id)
    if habit is None:
        raise NotFound("Habit not found")
    return habit


@bp.get("")
@handle_api_errors
def list_habits():
    habits = _repo().list_all(user_id=current_user().id)
    return jsonify([habit.to_dict() for habit in habits])


@bp.post("")
@handle_api_errors
def create_habit():
    """Create a habit owned by the caller; any ``user_id`` in the body is ignored."""

    form = HabitForm.parse(read_json_body())
    habit = build_habit(**form.model_dump())
    habit = _repo().create(habit, user_id=current_user().id)
    return jsonify(habit.to_dict()), 201


@bp.get("/<id:habit_id>")
@handle_api_errors
def get_habit(habit_id: int):
    return jsonify(_load_habit(_repo(), habit_id).to_dict())


@bp.put("/<id:habit_id>")
@handle_api_errors
def update_habit(habit_id: int):
    """Partially update a habit, clamping ``completed`` to ``to_complete``."""

    repo = _repo()
    habit = _load_habit(repo, habit_id)
    form = HabitUpdateForm.parse(read_json_body())
    habit = apply_habit_changes(habit, form.changes())
    habit = repo.update(habit, user_id=current_user().id)
    return jsonify(habit.to_dict())


@bp.delete("/<id:habit_id>")
@handle_api_errors
def delete_habit(habit_id: int):
    repo = _repo()
    habit = _load_habit(repo, habit_id)
    repo.delete(habit.id, user_id=current_user().id)
    return jsonify({"message": "Habit deleted"})
