"""Flask CLI commands."""

from __future__ import annotations


def register_commands(app) -> None:
    from promocal.scripts.cache_commands import remote_clear_cache_command
    from promocal.scripts.seed_admin import seed_admin_command
    from promocal.scripts.seed_demo import seed_demo_command

    app.cli.add_command(seed_admin_command)
    app.cli.add_command(seed_demo_command)
    app.cli.add_command(remote_clear_cache_command)
