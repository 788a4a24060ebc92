"""Shared extensions for the promocal application."""

from pathlib import Path

from flask import jsonify
from flask_bcrypt import Bcrypt
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy(session_options={"expire_on_commit": False})
migrate = Migrate()
# Admin session is a JWT carried in the admin_auth cookie
jwt = JWTManager()
bcrypt = Bcrypt()
limiter = Limiter(key_func=get_remote_address, default_limits=["600 per hour"])


def _unauthorized(reason: str):
    return jsonify({"ok": False, "error": "unauthorized", "reason": reason}), 401


@jwt.unauthorized_loader
def _missing_token(reason):
    return _unauthorized(reason)


@jwt.invalid_token_loader
def _invalid_token(reason):
    return _unauthorized(reason)


@jwt.expired_token_loader
def _expired_token(_header, _payload):
    return _unauthorized("token_expired")


def init_extensions(app) -> None:
    """Bind db, migrations, JWT auth, hashing and rate limiting to ``app``."""
    db.init_app(app)
    migrate.init_app(app, db, directory=str(Path(__file__).resolve().parent / "migrations"))
    jwt.init_app(app)
    bcrypt.init_app(app)
    limiter.enabled = app.config.get("RATELIMIT_ENABLED", True)
    limiter.init_app(app)
