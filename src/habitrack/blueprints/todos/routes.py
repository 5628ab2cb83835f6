"""Todo routes, scoped to the authenticated caller."""

from __future__ import annotations

from flask import jsonify

from ...domain.repositories import TodoRepository
from ...errors import NotFound, handle_api_errors
from ...extensions import get_session_factory
from ...forms import read_json_body
from ...infra.repositories.todo import SQLModelTodoRepository
from ...models.todo import Todo
from ...security import authenticate_request, current_user
from . import bp
from .forms import TodoForm, TodoUpdateForm

bp.before_request(authenticate_request)


def _repo() -> TodoRepository:
    return SQLModelTodoRepository(get_session_factory())


def _load_todo(repo: TodoRepository, todo_id: int) -> Todo:
    todo = repo.get_by_id(todo_id, user_id=current_user().id)
    if todo is None:
        raise NotFound("Todo not found")
    return todo


@bp.get("")
@handle_api_errors
def list_todos():
    todos = _repo().list_all(user_id=current_user().id)
    return jsonify([todo.to_dict() for todo in todos])


@bp.post("")
@handle_api_errors
def create_todo():
    form = TodoForm.parse(read_json_body())
    todo = _repo().create(Todo(**form.model_dump()), user_id=current_user().id)
    return jsonify(todo.to_dict()), 201


@bp.get("/<id:todo_id>")
@handle_api_errors
def get_todo(todo_id: int):
    return jsonify(_load_todo(_repo(), todo_id).to_dict())


@bp.put("/<id:todo_id>")
@handle_api_errors
def update_todo(todo_id: int):
    repo = _repo()
    todo = _load_todo(repo, todo_id)
    form = TodoUpdateForm.parse(read_json_body())
    for field, value in form.changes().items():
        setattr(todo, field, value)
    todo = repo.update(todo, user_id=current_user().id)
    return jsonify(todo.to_dict())


@bp.delete("/<id:todo_id>")
@handle_api_errors
def delete_todo(todo_id: int):
    repo = _repo()
    todo = _load_todo(repo, todo_id)
    repo.delete(todo.id, user_id=current_user().id)
    return jsonify({"message": "Todo deleted"})


@bp.patch("/<id:todo_id>/toggle")
@handle_api_errors
def toggle_todo(todo_id: int):
    """Flip ``is_completed``."""

    todo = _repo().toggle(todo_id, user_id=current_user().id)
    if todo is None:
        raise NotFound("Todo not found")
    return jsonify(todo.to_dict())
