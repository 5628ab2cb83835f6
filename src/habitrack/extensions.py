"""Database and session-store wiring for the Flask app."""

from __future__ import annotations

from flask import Flask, current_app

from .config import BaseConfig
from .infra.database import bootstrap_database
from .services.sessions import SessionStore

EXTENSION_KEY = "habitrack"


def init_app(app: Flask, config: BaseConfig, session_store: SessionStore) -> None:
    """Create the engine and schema, and attach shared state to ``app.extensions``."""

    engine, session_factory = bootstrap_database(config)
    app.extensions[EXTENSION_KEY] = {
        "config": config,
        "engine": engine,
        "session_factory": session_factory,
        "sessions": session_store,
    }


def _state() -> dict:
    state = current_app.extensions.get(EXTENSION_KEY)
    if state is None:  # pragma: no cover - misconfigured app
        raise RuntimeError("habitrack extension not initialized")
    return state


def get_config() -> BaseConfig:
    return _state()["config"]


def get_engine():
    """Return the initialized SQLModel engine."""
    return _state()["engine"]


def get_session_factory():
    return _state()["session_factory"]


def get_session_store() -> SessionStore:
    return _state()["sessions"]
