"""Application configuration for promocal."""

from __future__ import annotations

import os
from datetime import timedelta
from typing import Dict, Type

from dotenv import load_dotenv
from sqlalchemy.engine.url import make_url

load_dotenv()


def _engine_options_from_uri(uri: str) -> dict:
    url = make_url(uri)
    if url.get_backend_name() == "sqlite":
        return {"pool_pre_ping": True, "connect_args": {"timeout": 30}}
    if url.get_backend_name() in {"postgresql", "postgres"}:
        timeout = int(os.environ.get("DB_CONNECT_TIMEOUT_SECONDS", "10"))
        return {"pool_pre_ping": True, "connect_args": {"connect_timeout": timeout}}
    return {"pool_pre_ping": True}


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class BaseConfig:
    """Base configuration loaded for all environments."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///instance/promocal.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options_from_uri(SQLALCHEMY_DATABASE_URI)

    # Admin auth: a JWT access token carried in the "admin_auth" cookie.
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = ["cookies", "headers"]
    JWT_ACCESS_COOKIE_NAME = os.environ.get("ADMIN_COOKIE_NAME", "admin_auth")
    JWT_COOKIE_CSRF_PROTECT = True
    JWT_COOKIE_SECURE = _flag("SESSION_COOKIE_SECURE", "false")
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get("JWT_ACCESS_HOURS", "12")))

    RATELIMIT_DEFAULT = "600/hour"
    RATELIMIT_STORAGE_URI = os.environ.get("REDIS_URL", "memory://")
    RATELIMIT_ENABLED = _flag("RATELIMIT_ENABLED", "true")

    # Calendar
    CALENDAR_CACHE_SECONDS = int(os.environ.get("CALENDAR_CACHE_SECONDS", "300"))
    # 0 renders the home page on every request; the path tag still applies when > 0.
    PAGE_CACHE_SECONDS = int(os.environ.get("PAGE_CACHE_SECONDS", "0"))
    DEFAULT_LANG = os.environ.get("DEFAULT_LANG", "pt")
    ALLOWED_LANGS = tuple(
        lang.strip() for lang in (os.environ.get("ALLOWED_LANGS") or "pt,en").split(",") if lang.strip()
    )
    DEFAULT_BG_IMAGE_URL = os.environ.get("DEFAULT_BG_IMAGE_URL", "/static/img/bg-calendar.svg")
    BRAND_URL = os.environ.get("BRAND_URL", "https://meridianbet.rs")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    ENV = "development"


class TestingConfig(BaseConfig):
    TESTING = True
    # File-backed SQLite so Alembic migrations and app share the same DB.
    SQLALCHEMY_DATABASE_URI = os.environ.get("TEST_DATABASE_URL", "sqlite:///instance/test.db")
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options_from_uri(SQLALCHEMY_DATABASE_URI)
    RATELIMIT_ENABLED = False
    JWT_COOKIE_CSRF_PROTECT = False


class ProductionConfig(BaseConfig):
    ENV = "production"
    JWT_COOKIE_SECURE = True


config_by_name: Dict[str, Type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    # CI pipelines set APP_ENV=ci; map to testing defaults.
    "ci": TestingConfig,
}
