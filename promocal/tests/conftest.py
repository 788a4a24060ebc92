import os
import sys
from pathlib import Path

import pytest
import sqlalchemy as sa
from sqlalchemy.orm import scoped_session, sessionmaker
from alembic import command
from alembic.config import Config as AlembicConfig

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from promocal import create_app
from promocal.extensions import db
from promocal.core.auth.models import AdminUser
from promocal.core.auth.password import hash_password
from promocal.domains.promotions.models import promotion_models  # noqa: F401


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


def _alembic_config() -> AlembicConfig:
    cfg = AlembicConfig(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "promocal" / "migrations"))
    cfg.set_main_option("promocal_env", "testing")
    return cfg


@pytest.fixture(scope="session", autouse=True)
def migrated_db():
    """Apply migrations once per session to mirror production schema."""
    test_db = ROOT / "instance" / "test.db"
    if not os.environ.get("TEST_DATABASE_URL") and test_db.exists():
        test_db.unlink()
    cfg = _alembic_config()
    command.upgrade(cfg, "head")
    yield
    try:
        command.downgrade(cfg, "base")
    except Exception:
        # Downgrade is optional for local/CI runs; ignore failures to avoid hiding test results.
        pass


@pytest.fixture()
def app(migrated_db):
    """
    Create a per-test app with an isolated database transaction.

    Each test runs inside a transaction + savepoint so committed data rolls
    back after the test.
    """
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()

    engine = db.engine
    if engine.dialect.name == "sqlite":
        # pysqlite savepoint recipe: let SQLAlchemy emit BEGIN so SAVEPOINT/rollback work.
        @sa.event.listens_for(engine, "connect")
        def _sqlite_connect(dbapi_conn, conn_record):
            dbapi_conn.isolation_level = None

        @sa.event.listens_for(engine, "begin")
        def _sqlite_begin(conn):
            conn.exec_driver_sql("BEGIN")

    connection = engine.connect()
    transaction = connection.begin()

    session_factory = scoped_session(sessionmaker(bind=connection))
    db.session = session_factory
    session = session_factory()
    session.begin_nested()

    @sa.event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess, trans):
        if trans.nested and not trans._parent.nested:
            sess.begin_nested()

    try:
        yield app
    finally:
        sa.event.remove(session, "after_transaction_end", restart_savepoint)
        session_factory.remove()
        transaction.rollback()
        connection.close()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(app):
    user = AdminUser(email="admin@example.com", password_hash=hash_password("secret-pass-1"), name="Ana Admin")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def admin_headers(app, admin_user):
    from promocal.core.auth.auth_service import issue_access_token

    return {"Authorization": f"Bearer {issue_access_token(admin_user)}"}
