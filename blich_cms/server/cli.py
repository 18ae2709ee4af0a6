"""
Command line helpers for operating the CMS server.

``blich-cms-create-admin`` bootstraps the first admin account so that the
management console can log in.
"""

from __future__ import annotations

import asyncio

import typer

from blich_cms.core.database import async_session_maker, init_db
from blich_cms.core.database.repositories import AdminUserRepository
from blich_cms.core.errors import CmsError
from blich_cms.core.logging_config import setup_logging
from blich_cms.server.core.config import settings
from blich_cms.server.services.auth import AuthService

app = typer.Typer(help="Blich CMS admin tooling")


async def _create_admin(email: str, password: str, full_name: str) -> int:
    await init_db()
    async with async_session_maker() as session:
        service = AuthService(AdminUserRepository(session), settings.jwt)
        user = await service.create_admin(email, password, full_name=full_name)
        return user.id


@app.command()
def create_admin(
    email: str = typer.Argument(..., help="Login email of the new admin"),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True, help="Password"),
    full_name: str = typer.Option("", "--full-name", help="Display name"),
):
    """
    Create an admin user for the management console.
    """
    setup_logging(enable_file=False)
    try:
        user_id = asyncio.run(_create_admin(email, password, full_name))
    except CmsError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Created admin user {email} (id={user_id})")


if __name__ == "__main__":
    app()
