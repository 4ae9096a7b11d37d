"""Admin Management CLI — create, re-password, delete and list admin accounts.

Invariants:
    - Passwords are prompted (hidden, confirmed) and stored only as argon2 hashes
    - Every command opens its own standalone session against settings.sqlalchemy_url
    - CatalogError → non-zero exit with a one-line message

Design Decisions:
    - Typer commands wrap async service calls with asyncio.run: the CLI runs outside the
      app lifespan, so it never touches the process-wide db_manager
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import typer

from catalog_api.config import get_settings
from catalog_api.core.errors import CatalogError
from catalog_api.db.session import standalone_session
from catalog_api.services.admin_service import AdminService

logger = logging.getLogger(__name__)

cli = typer.Typer(help="Catalog API admin account management")

T = TypeVar("T")


def _run(operation: str, action: Callable[[AdminService], Awaitable[T]]) -> T:
    async def _main() -> T:
        async with standalone_session(get_settings().sqlalchemy_url, operation) as db:
            return await action(AdminService(db))

    try:
        return asyncio.run(_main())
    except CatalogError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(1)


@cli.command()
def add(username: str = typer.Argument(..., help="Admin username")):
    """Create a new admin account."""
    password = typer.prompt("Password", hide_input=True, confirmation_prompt=True)
    admin = _run("create admin", lambda s: s.create(username, password))
    typer.echo(f"Created admin '{admin.username}' (id={admin.id})")


@cli.command()
def passwd(username: str):
    """Change an admin's password."""
    password = typer.prompt("New password", hide_input=True, confirmation_prompt=True)
    _run("update admin password", lambda s: s.set_password(username, password))
    typer.echo(f"Password changed for '{username}'")


@cli.command()
def delete(username: str):
    """Delete an admin account."""
    _run("delete admin", lambda s: s.delete(username))
    typer.echo(f"Deleted admin '{username}'")


@cli.command("list")
def list_admins():
    """List admin accounts (id, username, created_at)."""
    admins = _run("list admins", lambda s: s.list_all())
    if not admins:
        typer.echo("No admins")
        return
    for admin in admins:
        typer.echo(f"{admin.id}\t{admin.username}\t{admin.created_at.isoformat()}")


if __name__ == "__main__":
    cli()
