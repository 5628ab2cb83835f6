"""Pytest configuration and shared fixtures for Habitrack tests.

Every test gets its own SQLite file under ``tmp_path`` plus a fresh in-memory
session store, so nothing touches the real instance database.
"""

from __future__ import annotations

import pytest
from sqlmodel import SQLModel, create_engine

from habitrack import SessionStore, TestConfig, create_app
from habitrack.infra.database import create_session_factory

# Import all models to ensure they're registered with SQLModel metadata
from habitrack.models import Habit, Todo, User  # noqa: F401
from habitrack.services.auth import hash_password

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create an isolated SQLite database for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    engine = create_engine(
        f"sqlite:///{tmp_path / 'repo.db'}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the ``Callable[[], Session]`` repositories expect."""

    return create_session_factory(db_engine)


@pytest.fixture
def user_factory(session_factory):
    """Factory persisting users directly, bypassing the HTTP layer."""

    def _create_user(
        name: str = "Tester",
        email: str = "tester@example.com",
        password: str = "secret1",
    ) -> User:
        with session_factory() as session:
            user = User(name=name, email=email, password_hash=hash_password(password))
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user

    return _create_user


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def config(tmp_path, monkeypatch):
    """Test configuration rooted in ``tmp_path``."""

    monkeypatch.setenv("HABITRACK_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("HABITRACK_DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")
    monkeypatch.delenv("HABITRACK_TOKEN_HEADER", raising=False)
    monkeypatch.setenv("HABITRACK_DEV_MODE", "true")
    return TestConfig()


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def app(config, session_store):
    return create_app(config, session_store=session_store)


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def register(client):
    """Register a user over HTTP and return the response JSON."""

    def _register(name: str = "A", email: str = "a@x.com", password: str = "secret1", **extra):
        response = client.post(
            "/register",
            json={"name": name, "email": email, "password": password, **extra},
        )
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    return _register


@pytest.fixture
def login(client):
    """Log in and return ``(token, user_json)``."""

    def _login(email: str = "a@x.com", password: str = "secret1"):
        response = client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.get_json()
        body = response.get_json()
        return body["token"], body["user"]

    return _login


@pytest.fixture
def auth_headers(register, login):
    """Factory creating a fresh user and returning ``(headers, user_json)``."""

    def _auth_headers(name: str = "A", email: str = "a@x.com", password: str = "secret1"):
        register(name=name, email=email, password=password)
        token, user = login(email=email, password=password)
        return {"TOKEN": token}, user

    return _auth_headers
