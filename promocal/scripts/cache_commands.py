"""Cache maintenance commands.

The calendar cache lives inside each server process, so clearing it goes
through the admin API of the running site.

Usage:
    flask remote-clear-cache --base-url https://promo.example.com --email admin@example.com
"""

from __future__ import annotations

import click

from promocal.core.admin.header_client import AdminHeaderClient


@click.command("remote-clear-cache")
@click.option("--base-url", required=True, help="Root URL of the running site")
@click.option("--email", required=True)
@click.option("--password", prompt=True, hide_input=True)
def remote_clear_cache_command(base_url: str, email: str, password: str):
    """Log in as an admin and clear the calendar cache of a running server."""
    client = AdminHeaderClient(base_url)
    if not client.login(email, password):
        raise click.ClickException("login failed")
    client.load_me()
    toast = client.clear_cache()
    click.echo(f"[{client.display_name}] {toast.message}", err=toast.kind == "error")
    client.logout()
    if toast.kind == "error":
        raise SystemExit(1)
