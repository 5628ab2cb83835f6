"""Tests for request form validation."""

from __future__ import annotations

from datetime import date

import pytest

from habitrack.blueprints.auth.forms import LoginForm, RegisterForm
from habitrack.blueprints.habits.forms import HabitForm, HabitUpdateForm
from habitrack.blueprints.todos.forms import TodoForm, TodoUpdateForm
from habitrack.blueprints.users.forms import UserUpdateForm
from habitrack.errors import ValidationError
from habitrack.models import HabitFrequency


def _message(form_cls, payload) -> str:
    with pytest.raises(ValidationError) as excinfo:
        form_cls.parse(payload)
    return excinfo.value.message


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"name": "A", "email": "a@x.com"},
        {"name": "", "email": "a@x.com", "password": "secret1"},
        {"name": None, "email": "a@x.com", "password": "secret1"},
    ],
)
def test_register_requires_all_credentials(payload):
    assert _message(RegisterForm, payload) == "Name, email and password are required"


@pytest.mark.parametrize("email", ["plain", "a@b", "a b@x.com", "@x.com", "a@x."])
def test_register_rejects_malformed_email(email):
    payload = {"name": "A", "email": email, "password": "secret1"}
    assert _message(RegisterForm, payload) == "Invalid email format"


def test_register_enforces_password_length():
    payload = {"name": "A", "email": "a@x.com", "password": "12345"}
    assert _message(RegisterForm, payload) == "Password must be at least 6 characters long"


def test_register_defaults_profile_stats():
    form = RegisterForm.parse({"name": " A ", "email": "a@x.com", "password": "secret1"})
    assert form.name == "A"
    assert (form.avatar_id, form.health, form.experience, form.level) == (1, 0, 0, 0)


def test_non_object_body_is_rejected():
    assert _message(LoginForm, ["a@x.com"]) == "Request body must be a JSON object"


def test_login_treats_null_as_empty():
    form = LoginForm.parse({"email": None})
    assert (form.email, form.password) == ("", "")


def test_habit_form_defaults():
    form = HabitForm.parse({"name": "Run", "user_id": 99})
    assert form.model_dump() == {
        "name": "Run",
        "completed": 0,
        "to_complete": 1,
        "status": "ACTIVE",
        "freq": HabitFrequency.DAILY,
    }


def test_habit_form_requires_name_and_valid_freq():
    assert _message(HabitForm, {"freq": "DAILY"}) == "Please provide a habit name."
    assert _message(HabitForm, {"name": "  "}) == "Please provide a habit name."
    assert _message(HabitForm, {"name": "Run", "freq": "HOURLY"}).startswith("freq:")


def test_habit_form_accepts_lowercase_freq():
    assert HabitForm.parse({"name": "Run", "freq": "weekly"}).freq is HabitFrequency.WEEKLY


def test_habit_update_tracks_only_sent_fields():
    form = HabitUpdateForm.parse({"name": "Jog"})
    assert form.changes() == {"name": "Jog"}


def test_habit_update_rejects_explicit_null():
    assert _message(HabitUpdateForm, {"to_complete": None}) == "to_complete cannot be null"


def test_todo_form_defaults_date_to_today():
    form = TodoForm.parse({"name": "Milk"})
    assert form.date == date.today()
    assert form.is_completed is False


def test_todo_form_parses_iso_date():
    form = TodoForm.parse({"name": "Milk", "date": "2024-05-01"})
    assert form.date == date(2024, 5, 1)


def test_todo_update_changes():
    form = TodoUpdateForm.parse({"is_completed": True})
    assert form.changes() == {"is_completed": True}


def test_user_update_validation():
    assert _message(UserUpdateForm, {"email": "bad"}) == "Invalid email format"
    assert _message(UserUpdateForm, {"password": "123"}) == "Password must be at least 6 characters long"
    assert _message(UserUpdateForm, {"name": None}) == "name cannot be null"
    assert UserUpdateForm.parse({"level": 2}).changes() == {"level": 2}
