"""Admin API (identity, cache clearing) and the admin back-office page."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, redirect, render_template, url_for
from flask_jwt_extended import get_jwt_identity

from promocal.core.auth.auth_service import get_admin
from promocal.core.auth.schemas import serialize_admin
from promocal.core.cache import revalidate_path, revalidate_tag
from promocal.core.utils.decorators import current_roles_optional, require_roles
from promocal.domains.promotions.services.calendar_data import CALENDAR_DATA_TAG

logger = logging.getLogger(__name__)

admin_api_bp = Blueprint("admin_api", __name__)
admin_pages_bp = Blueprint("admin_pages", __name__)


@admin_api_bp.get("/me")
@require_roles({"admin"})
def me():
    user = get_admin(get_jwt_identity())
    if not user or not user.is_active:
        return jsonify({"ok": False, "error": "not_found"}), 404
    return jsonify({"ok": True, "user": serialize_admin(user).model_dump()})


@admin_api_bp.post("/clear-calendar-cache")
@require_roles({"admin"})
def clear_calendar_cache():
    """Invalidate cached calendar data and the rendered home page."""
    try:
        revalidate_tag(CALENDAR_DATA_TAG)
        revalidate_path("/")
    except Exception:
        logger.exception("Error clearing calendar cache")
        return jsonify({"ok": False}), 500
    return jsonify({"ok": True})


@admin_pages_bp.get("/admin")
def admin_home():
    if "admin" not in current_roles_optional():
        return redirect(url_for("auth_pages.login_page"))
    return render_template("admin/index.html")
