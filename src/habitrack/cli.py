"""Flask CLI commands for Habitrack."""

from __future__ import annotations

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("habitrack-init-db")
    def habitrack_init_db() -> None:
        """Create database tables if they do not exist."""

        from .extensions import get_engine
        from .infra.database import init_database

        init_database(get_engine())
        click.echo("Database initialized.")

    @app.cli.command("habitrack-create-user")
    @click.option("--name", required=True, help="Display name")
    @click.option("--email", required=True, help="Login email")
    @click.password_option(help="Login password")
    def habitrack_create_user(name: str, email: str, password: str) -> None:
        """Register a user with the same rules as POST /register."""

        from .blueprints.auth.forms import RegisterForm
        from .errors import ApiError
        from .extensions import get_session_factory
        from .services.auth import register_user

        try:
            form = RegisterForm.parse({"name": name, "email": email, "password": password})
            user = register_user(**form.model_dump(), session_factory=get_session_factory())
        except ApiError as exc:
            raise click.ClickException(exc.message) from exc
        click.echo(f"Created user #{user.id} <{user.email}>")
