"""Habitrack habit/todo tracking API package."""

from __future__ import annotations

from flask import Flask

from .config import BaseConfig, DevConfig, TestConfig
from .services.sessions import SessionStore


def create_app(
    config: BaseConfig | None = None,
    *,
    session_store: SessionStore | None = None,
) -> Flask:
    """Build the Flask application.

    ``session_store`` lets callers share or inspect the token map; by default a
    fresh in-memory store is created for the app.
    """

    from . import cli, converters, extensions
    from .blueprints import auth, habits, home, todos, users
    from .errors import register_error_handlers
    from .logging_config import setup_logging

    config = config or DevConfig()
    logger = setup_logging(config)

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config.SECRET_KEY,
        DEBUG=config.DEBUG,
        TESTING=config.TESTING,
        HABITRACK_CONFIG=config,
    )
    app.json.sort_keys = False

    if session_store is None:
        session_store = SessionStore(token_bytes=config.TOKEN_BYTES)
    extensions.init_app(app, config, session_store)
    register_error_handlers(app)
    converters.init_app(app)

    for blueprint in (home.bp, auth.bp, users.bp, habits.bp, todos.bp):
        app.register_blueprint(blueprint)

    cli.init_app(app)

    logger.info("Application created", extra={"database_url": config.DATABASE_URL})
    return app


__all__ = ["BaseConfig", "DevConfig", "SessionStore", "TestConfig", "create_app"]
