"""Authentication services: registration, credential checks, session tokens."""

from __future__ import annotations

from typing import Callable, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from ..domain.repositories import UserRepository
from ..errors import EmailTaken, InvalidCredentials
from ..infra.repositories.user import SQLModelUserRepository
from ..logging_config import get_logger
from ..models.user import User
from .sessions import SessionIdentity, SessionStore

SessionFactory = Callable[[], Session]

_hasher = PasswordHasher()
logger = get_logger("auth")


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    """Return True when ``password`` matches the stored argon2 hash."""

    try:
        return _hasher.verify(password_hash, password)
    except (VerifyMismatchError, InvalidHash, VerificationError):
        return False


def identity_for(user: User) -> SessionIdentity:
    return SessionIdentity(id=user.id, name=user.name, email=user.email)


def register_user(
    *,
    name: str,
    email: str,
    password: str,
    avatar_id: int = 1,
    health: int = 0,
    experience: int = 0,
    level: int = 0,
    session_factory: SessionFactory,
) -> User:
    """Create a new user with a hashed password.

    Raises ``EmailTaken`` when the address is already registered.
    """

    repo: UserRepository = SQLModelUserRepository(session_factory)
    if repo.get_by_email(email) is not None:
        raise EmailTaken()
    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        avatar_id=avatar_id,
        health=health,
        experience=experience,
        level=level,
    )
    try:
        user = repo.create(user)
    except IntegrityError as exc:
        # Lost a race with a concurrent registration for the same email.
        raise EmailTaken() from exc
    logger.info("User registered", extra={"user_id": user.id})
    return user


def authenticate(
    *,
    email: str,
    password: str,
    session_factory: SessionFactory,
) -> Optional[User]:
    """Validate credentials and return the user when correct."""

    email = email.strip()
    if not email or not password:
        return None
    repo: UserRepository = SQLModelUserRepository(session_factory)
    user = repo.get_by_email(email)
    if user is None or not verify_password(user.password_hash, password):
        return None
    if _hasher.check_needs_rehash(user.password_hash):
        user.password_hash = hash_password(password)
        user = repo.update(user)
    return user


def login(
    *,
    email: str,
    password: str,
    session_factory: SessionFactory,
    sessions: SessionStore,
) -> tuple[str, User]:
    """Authenticate and issue a session token; returns ``(token, user)``."""

    user = authenticate(email=email, password=password, session_factory=session_factory)
    if user is None:
        logger.warning("Failed login attempt", extra={"email": email})
        raise InvalidCredentials()
    token = sessions.issue(identity_for(user))
    logger.info("User logged in", extra={"user_id": user.id})
    return token, user


def logout(token: str, *, sessions: SessionStore) -> None:
    """Forget ``token``; unknown tokens are ignored."""

    identity = sessions.get(token)
    sessions.delete(token)
    if identity is not None:
        logger.info("User logged out", extra={"user_id": identity.id})


__all__ = [
    "authenticate",
    "hash_password",
    "identity_for",
    "login",
    "logout",
    "register_user",
    "verify_password",
]
