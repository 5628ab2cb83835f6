"""Profile management for existing users."""

from __future__ import annotations

from typing import Any, Callable

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from ..domain.repositories import UserRepository
from ..errors import EmailTaken
from ..infra.repositories.user import SQLModelUserRepository
from ..logging_config import get_logger
from ..models.user import User
from .auth import hash_password
from .sessions import SessionStore

SessionFactory = Callable[[], Session]

logger = get_logger("users")

_PROFILE_FIELDS = ("name", "email", "avatar_id", "health", "experience", "level")


def list_users(session_factory: SessionFactory) -> list[User]:
    """Return all users ordered by id."""
    return SQLModelUserRepository(session_factory).list_all()


def update_user(
    user: User,
    changes: dict[str, Any],
    *,
    session_factory: SessionFactory,
    sessions: SessionStore,
) -> User:
    """Apply a partial update to ``user`` and persist it.

    Live session snapshots of the user are rewritten when name or email change.
    """

    repo: UserRepository = SQLModelUserRepository(session_factory)
    new_email = changes.get("email")
    if new_email is not None and new_email != user.email:
        other = repo.get_by_email(new_email)
        if other is not None and other.id != user.id:
            raise EmailTaken()

    for field in _PROFILE_FIELDS:
        if field in changes:
            setattr(user, field, changes[field])
    if "password" in changes:
        user.password_hash = hash_password(changes["password"])

    try:
        user = repo.update(user)
    except IntegrityError as exc:
        raise EmailTaken() from exc

    if "name" in changes or "email" in changes:
        sessions.refresh_user(user.id, name=user.name, email=user.email)
    return user


def delete_user(user_id: int, *, session_factory: SessionFactory, sessions: SessionStore) -> None:
    """Delete the user and everything they own, and end all their sessions."""

    SQLModelUserRepository(session_factory).delete(user_id)
    revoked = sessions.revoke_user(user_id)
    logger.info("User deleted", extra={"user_id": user_id, "revoked_sessions": revoked})


__all__ = ["delete_user", "list_users", "update_user"]
