"""CLI commands for the login gate."""

from __future__ import annotations

import click

from crm.application.login import LoginHandler, LogoutHandler
from crm.domain.exceptions import DomainException
from crm.infrastructure.bootstrap import auth_gateway, session_store
from crm.infrastructure.http.api_client import ApiError


@click.command("login")
@click.option("--username", prompt=True, help="Admin username.")
@click.option("--password", prompt=True, hide_input=True, help="Admin password.")
def login(username: str, password: str) -> None:
    """Log in and remember the session token."""
    try:
        handler = LoginHandler(auth_gateway=auth_gateway(), session_repo=session_store())
        handler.handle(username=username, password=password)
    except (DomainException, ApiError, OSError) as exc:
        raise click.ClickException(str(exc))

    click.echo("Logged in.")


@click.command("logout")
def logout() -> None:
    """Forget the stored session token."""
    try:
        LogoutHandler(session_repo=session_store()).handle()
    except OSError as exc:
        raise click.ClickException(str(exc))

    click.echo("Logged out.")
