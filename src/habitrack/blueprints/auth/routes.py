"""Registration, login and logout routes."""

from __future__ import annotations

from flask import g, jsonify

from ...errors import handle_api_errors
from ...extensions import get_session_factory, get_session_store
from ...forms import read_json_body
from ...security import token_required
from ...services import auth as auth_service
from . import bp
from .forms import LoginForm, RegisterForm


@bp.post("/register")
@handle_api_errors
def register():
    """Create an account and return its public profile."""

    form = RegisterForm.parse(read_json_body())
    user = auth_service.register_user(
        **form.model_dump(),
        session_factory=get_session_factory(),
    )
    return jsonify(user.public_dict()), 201


@bp.post("/login")
@handle_api_errors
def login():
    """Exchange email + password for a session token."""

    form = LoginForm.parse(read_json_body())
    token, user = auth_service.login(
        email=form.email,
        password=form.password,
        session_factory=get_session_factory(),
        sessions=get_session_store(),
    )
    return jsonify({"token": token, "user": user.public_dict()})


@bp.post("/logout")
@token_required
@handle_api_errors
def logout():
    auth_service.logout(g.session_token, sessions=get_session_store())
    return jsonify({"message": "Logged out"})
