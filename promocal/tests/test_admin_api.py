"""Admin identity, cache clearing and the back-office page."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from promocal.core.auth.auth_service import issue_access_token
from promocal.core.cache import get_cache
from promocal.domains.promotions.services.calendar_data import CALENDAR_DATA_TAG
from promocal.extensions import db

pytestmark = pytest.mark.integration

CLEAR_URL = "/api/admin/clear-calendar-cache"


class TestMe:
    def test_returns_current_admin(self, client, admin_headers, admin_user):
        resp = client.get("/api/admin/me", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.get_json() == {
            "ok": True,
            "user": {
                "id": admin_user.id,
                "email": "admin@example.com",
                "name": "Ana Admin",
                "role_codes": ["admin"],
            },
        }

    def test_requires_token(self, client):
        resp = client.get("/api/admin/me")
        assert resp.status_code == 401
        assert resp.get_json() == {"ok": False, "error": "unauthorized"}

    def test_deactivated_admin(self, client, admin_headers, admin_user):
        admin_user.is_active = False
        db.session.commit()
        assert client.get("/api/admin/me", headers=admin_headers).status_code == 404


class TestClearCalendarCache:
    def test_requires_admin(self, client):
        assert client.post(CLEAR_URL).status_code == 401

    def test_forbidden_without_admin_role(self, app, client):
        from flask_jwt_extended import create_access_token

        token = create_access_token(identity="1", additional_claims={"roles": ["viewer"]})
        resp = client.post(CLEAR_URL, headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 403
        assert resp.get_json() == {"ok": False, "error": "forbidden"}

    def test_clears_data_and_rendered_page(self, app, client, admin_headers):
        cache = get_cache()
        cache.store(("calendar-data", 2024, 0), "stale", 300, (CALENDAR_DATA_TAG,))
        cache.store(("render", "/", ("", False)), "<html>", 300, ("_path:/",))
        cache.store("unrelated", 1, 300, ("other",))

        resp = client.post(CLEAR_URL, headers=admin_headers)

        assert resp.status_code == 200
        assert resp.get_json() == {"ok": True}
        assert len(cache) == 1
        assert cache.lookup("unrelated") == 1

    def test_clear_is_idempotent(self, client, admin_headers):
        assert client.post(CLEAR_URL, headers=admin_headers).get_json() == {"ok": True}
        assert client.post(CLEAR_URL, headers=admin_headers).get_json() == {"ok": True}

    def test_invalidation_failure_returns_bare_error(self, client, admin_headers):
        with patch(
            "promocal.core.admin.controllers.revalidate_tag",
            side_effect=RuntimeError("cache backend down"),
        ):
            resp = client.post(CLEAR_URL, headers=admin_headers)
        assert resp.status_code == 500
        assert resp.get_json() == {"ok": False}

    def test_path_failure_returns_bare_error(self, client, admin_headers):
        with patch(
            "promocal.core.admin.controllers.revalidate_path",
            side_effect=RuntimeError("boom"),
        ):
            resp = client.post(CLEAR_URL, headers=admin_headers)
        assert resp.status_code == 500
        assert resp.get_json() == {"ok": False}

    def test_cookie_session_with_csrf(self, app, client, admin_user):
        app.config["JWT_COOKIE_CSRF_PROTECT"] = True
        client.post("/api/auth", json={"email": "admin@example.com", "password": "secret-pass-1"})

        assert client.post(CLEAR_URL).status_code == 401

        csrf = client.get_cookie("csrf_access_token")
        resp = client.post(CLEAR_URL, headers={"X-CSRF-TOKEN": csrf.value})
        assert resp.status_code == 200


class TestAdminPage:
    def test_redirects_anonymous_to_login(self, client):
        resp = client.get("/admin")
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/login")

    def test_renders_header_for_admin(self, client, admin_user):
        client.set_cookie("admin_auth", issue_access_token(admin_user))
        resp = client.get("/admin")
        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert "Clear cache" in html
        assert "admin-name" in html
