"""Tests for registration, credential checks and token issuance."""

from __future__ import annotations

import pytest

from habitrack.errors import EmailTaken, InvalidCredentials
from habitrack.services import auth
from habitrack.services.sessions import SessionIdentity, SessionStore


def test_register_user_hashes_password(session_factory):
    user = auth.register_user(
        name="Alice", email="alice@example.com", password="secret1", session_factory=session_factory
    )

    assert user.id is not None
    assert user.password_hash != "secret1"
    assert user.password_hash.startswith("$argon2")
    assert (user.avatar_id, user.health, user.experience, user.level) == (1, 0, 0, 0)


def test_register_user_accepts_profile_overrides(session_factory):
    user = auth.register_user(
        name="Alice",
        email="alice@example.com",
        password="secret1",
        avatar_id=4,
        level=3,
        session_factory=session_factory,
    )

    assert user.avatar_id == 4
    assert user.level == 3
    assert user.health == 0


def test_register_user_rejects_duplicate_email(session_factory, user_factory):
    user_factory(email="taken@example.com")

    with pytest.raises(EmailTaken):
        auth.register_user(
            name="Other", email="taken@example.com", password="secret1", session_factory=session_factory
        )


def test_authenticate(session_factory, user_factory):
    user_factory(email="alice@example.com", password="secret1")

    found = auth.authenticate(email="alice@example.com", password="secret1", session_factory=session_factory)
    assert found is not None
    assert found.email == "alice@example.com"

    assert auth.authenticate(email="alice@example.com", password="wrong!", session_factory=session_factory) is None
    assert auth.authenticate(email="nobody@example.com", password="secret1", session_factory=session_factory) is None
    assert auth.authenticate(email="", password="secret1", session_factory=session_factory) is None


def test_login_issues_token_mapped_to_identity(session_factory, user_factory):
    user = user_factory(name="Alice", email="alice@example.com")
    sessions = SessionStore()

    token, logged_in = auth.login(
        email="alice@example.com", password="secret1", session_factory=session_factory, sessions=sessions
    )

    assert logged_in.id == user.id
    identity = sessions.get(token)
    assert identity is not None
    assert identity.to_dict() == {"id": user.id, "name": "Alice", "email": "alice@example.com"}


def test_login_failure_raises_invalid_credentials(session_factory, user_factory):
    user_factory(email="alice@example.com")
    sessions = SessionStore()

    with pytest.raises(InvalidCredentials):
        auth.login(email="alice@example.com", password="nope123", session_factory=session_factory, sessions=sessions)
    assert len(sessions) == 0


def test_logout_removes_token_and_ignores_unknown():
    sessions = SessionStore()
    token = sessions.issue(SessionIdentity(id=1, name="A", email="a@x.com"))

    auth.logout(token, sessions=sessions)
    auth.logout(token, sessions=sessions)

    assert sessions.get(token) is None


def test_verify_password_handles_garbage_hash():
    assert auth.verify_password("not-a-hash", "secret1") is False
    assert auth.verify_password(auth.hash_password("secret1"), "secret1") is True
