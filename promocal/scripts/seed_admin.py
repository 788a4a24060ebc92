"""Create or reset a back-office admin account.

Usage:
    flask seed-admin --email admin@example.com --password secret123
"""

from __future__ import annotations

import click
from flask.cli import with_appcontext

from promocal.core.auth.auth_service import create_or_update_admin


@click.command("seed-admin")
@click.option("--email", required=True)
@click.option("--password", required=True)
@click.option("--name", default=None, help="Display name shown in the admin header")
@with_appcontext
def seed_admin_command(email: str, password: str, name: str | None):
    """Create an admin user (or reset its password)."""
    try:
        user = create_or_update_admin(email, password, name)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Admin ready: {user.email} (id={user.id})")
