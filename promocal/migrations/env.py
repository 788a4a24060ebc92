"""Alembic environment for promocal."""

from __future__ import annotations

import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import engine_from_config, pool

sys.path.append(str(Path(__file__).resolve().parents[2]))

from promocal import create_app
from promocal.extensions import db
from promocal.core.auth import models as auth_models  # noqa: F401
from promocal.domains.promotions.models import promotion_models  # noqa: F401

config = context.config

if config.config_file_name and Path(config.config_file_name).exists():
    # Keep application loggers alive when migrations run inside the test session.
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = db.metadata


def get_url() -> str:
    app = create_app(config.get_main_option("promocal_env", "development"))
    return app.config["SQLALCHEMY_DATABASE_URI"]


def run_migrations_offline() -> None:
    url = get_url()
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_url()

    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            # SQLite needs batch mode for ALTER-style changes
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
