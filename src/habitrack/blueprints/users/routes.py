"""User profile routes; every detail route is restricted to the profile owner."""

from __future__ import annotations

from flask import jsonify

from ...errors import NotFound, handle_api_errors
from ...extensions import get_session_factory, get_session_store
from ...forms import read_json_body
from ...infra.repositories.user import SQLModelUserRepository
from ...models.user import User
from ...security import authenticate_request, ensure_owner
from ...services import users as user_service
from . import bp
from .forms import UserUpdateForm

bp.before_request(authenticate_request)


def _load_owned_user(user_id: int) -> User:
    """404 when the user is absent, 403 when it is someone else."""

    user = SQLModelUserRepository(get_session_factory()).get_by_id(user_id)
    if user is None:
        raise NotFound("User not found")
    ensure_owner(user.id)
    return user


@bp.get("")
@handle_api_errors
def list_users():
    users = user_service.list_users(get_session_factory())
    return jsonify([user.public_dict() for user in users])


@bp.get("/<id:user_id>")
@handle_api_errors
def get_user(user_id: int):
    return jsonify(_load_owned_user(user_id).public_dict())


@bp.put("/<id:user_id>")
@handle_api_errors
def update_user(user_id: int):
    """Partially update the caller's own profile."""

    user = _load_owned_user(user_id)
    form = UserUpdateForm.parse(read_json_body())
    user = user_service.update_user(
        user,
        form.changes(),
        session_factory=get_session_factory(),
        sessions=get_session_store(),
    )
    return jsonify(user.public_dict())


@bp.delete("/<id:user_id>")
@handle_api_errors
def delete_user(user_id: int):
    """Delete the caller's account, its habits and todos, and all its sessions."""

    user = _load_owned_user(user_id)
    user_service.delete_user(
        user.id,
        session_factory=get_session_factory(),
        sessions=get_session_store(),
    )
    return jsonify({"message": "User deleted"})
