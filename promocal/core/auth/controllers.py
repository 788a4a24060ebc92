"""Admin auth controllers: cookie login/logout API and the login page."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, render_template, request
from flask_jwt_extended import set_access_cookies, unset_jwt_cookies
from pydantic import ValidationError

from promocal.core.auth.auth_service import authenticate_admin, issue_access_token
from promocal.core.auth.schemas import LoginRequest, serialize_admin
from promocal.extensions import limiter

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth_api", __name__)
auth_pages_bp = Blueprint("auth_pages", __name__)


def _jsonable_errors(exc: ValidationError) -> list[dict]:
    errors = exc.errors()
    for err in errors:
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
    return errors


@auth_bp.post("")
@limiter.limit("10/minute")
def login():
    payload = request.get_json(silent=True) or {}
    try:
        data = LoginRequest.model_validate(payload)
    except ValidationError as exc:
        return (
            jsonify({"ok": False, "error": "bad_request", "details": _jsonable_errors(exc)}),
            400,
        )
    user = authenticate_admin(data.email, data.password)
    if not user:
        logger.warning("Failed admin login for %s", data.email)
        return jsonify({"ok": False, "error": "invalid_credentials"}), 401

    resp = jsonify({"ok": True, "user": serialize_admin(user).model_dump()})
    set_access_cookies(resp, issue_access_token(user))
    return resp


@auth_bp.delete("")
def logout():
    # Always succeeds; clearing the cookie needs no valid token.
    resp = jsonify({"ok": True})
    unset_jwt_cookies(resp)
    return resp


@auth_pages_bp.get("/login")
def login_page():
    return render_template("auth/login.html")
