"""promocal application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from flask import Flask

from promocal.config import config_by_name
from promocal.core.cache import init_cache
from promocal.extensions import init_extensions


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the promocal Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(
        __name__,
        instance_path=str(instance_root),
        instance_relative_config=True,
        static_folder=str(Path(__file__).parent / "static"),
        template_folder=str(Path(__file__).parent / "templates"),
    )
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)

    instance_root.mkdir(parents=True, exist_ok=True)

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI")
    if db_uri and db_uri.startswith("sqlite:///") and db_uri != "sqlite:///:memory:":
        db_path = db_uri.replace("sqlite:///", "", 1)
        abs_path = Path(db_path)
        if not abs_path.is_absolute():
            abs_path = project_root / db_path
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{abs_path}"

    _configure_logging(app)
    init_extensions(app)
    _init_calendar_cache(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    from promocal.scripts import register_commands

    register_commands(app)

    return app


def _configure_logging(app: Flask) -> None:
    level = os.environ.get("LOG_LEVEL", "DEBUG" if app.debug else "INFO").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    app.logger.setLevel(level)


def _init_calendar_cache(app: Flask) -> None:
    """One cache per app; the calendar data cache is passed to page logic explicitly."""
    from promocal.domains.promotions.services.calendar_data import CalendarDataCache

    cache = init_cache(app)
    app.extensions["promocal.calendar_data"] = CalendarDataCache(
        cache, ttl=app.config.get("CALENDAR_CACHE_SECONDS", 300)
    )


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from promocal.core.admin.controllers import admin_api_bp, admin_pages_bp
    from promocal.core.auth.controllers import auth_bp, auth_pages_bp
    from promocal.domains.promotions.controllers import calendar_api_bp, calendar_pages_bp

    app.register_blueprint(calendar_pages_bp)
    app.register_blueprint(calendar_api_bp, url_prefix="/api/calendar")
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(auth_pages_bp)
    app.register_blueprint(admin_api_bp, url_prefix="/api/admin")
    app.register_blueprint(admin_pages_bp)


def _register_error_handlers(app: Flask) -> None:
    """Basic JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
