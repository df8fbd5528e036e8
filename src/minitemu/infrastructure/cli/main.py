"""Entry point: the ``minitemu`` command and its interactive main menu."""

from __future__ import annotations

import click

from minitemu.application.sign_up import SignUpHandler
from minitemu.domain.exceptions import DomainException
from minitemu.domain.model.user import Role
from minitemu.infrastructure.bootstrap import Application, build_application
from minitemu.infrastructure.cli import render
from minitemu.infrastructure.cli.customer_menu import customer_menu
from minitemu.infrastructure.cli.seller_menu import seller_menu
from minitemu.infrastructure.logging_config import setup_logging
from minitemu.infrastructure.settings import Settings

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_ROLE_MENUS = {
    Role.SELLER: seller_menu,
    Role.CUSTOMER: customer_menu,
}


def _login(app: Application) -> None:
    click.echo("\n=== Login ===")
    username = click.prompt("Username")
    password = click.prompt("Password", hide_input=True)

    identity = app.session.login(username, password)
    click.echo(f"Login successful! Welcome, {identity.username}.")
    _ROLE_MENUS[identity.role](app)


def _sign_up(app: Application) -> None:
    click.echo("\n=== Sign Up ===")
    username = click.prompt("Username")
    password = click.prompt("Password", hide_input=True)
    role = click.prompt(
        "Role",
        type=click.Choice([r.value for r in Role], case_sensitive=False),
    )

    user = SignUpHandler(user_manager=app.users).handle(username, password, role)
    click.echo(f"Registration successful for {user.role.value} '{user.username}'.")


def main_menu(app: Application) -> None:
    while True:
        click.echo("\n=== Mini - Temu ===")
        click.echo("1. Login")
        click.echo("2. Sign Up")
        click.echo("3. Exit")
        choice = click.prompt("Enter your choice", type=int)

        if choice == 3:
            click.echo("Thank you for using our system. Goodbye!")
            return

        try:
            if choice == 1:
                _login(app)
            elif choice == 2:
                _sign_up(app)
            else:
                click.echo("Invalid choice. Please try again.")
        except DomainException as exc:
            render.show_error(str(exc))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Console log level (defaults to MINITEMU_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None) -> None:
    """MiniTemu: a small in-memory marketplace."""
    setup_logging(log_level or Settings.LOG_LEVEL, Settings.LOG_FILE)


@cli.command("run")
def run() -> None:
    """Start the interactive marketplace. Nothing is kept after exit."""
    main_menu(build_application())
