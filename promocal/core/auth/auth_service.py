"""Authentication service layer."""

from __future__ import annotations

import logging
from typing import Optional

from flask_jwt_extended import create_access_token

from promocal.core.auth.models import AdminUser
from promocal.core.auth.password import hash_password, verify_password
from promocal.extensions import db

logger = logging.getLogger(__name__)


def authenticate_admin(email: str, password: str) -> Optional[AdminUser]:
    """Return the admin if credentials are valid and the account is active."""
    user = AdminUser.query.filter_by(email=(email or "").strip().lower()).first()
    if not user or not user.is_active:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def issue_access_token(user: AdminUser) -> str:
    return create_access_token(identity=str(user.id), additional_claims={"roles": user.role_codes})


def get_admin(user_id) -> Optional[AdminUser]:
    try:
        return db.session.get(AdminUser, int(user_id))
    except (TypeError, ValueError):
        return None


def create_or_update_admin(email: str, password: str, name: Optional[str] = None) -> AdminUser:
    """Create an admin account, or reset the password of an existing one."""
    email = (email or "").strip().lower()
    if not email:
        raise ValueError("invalid_email")
    if len(password or "") < 8:
        raise ValueError("password_too_short")

    user = AdminUser.query.filter_by(email=email).first()
    if not user:
        user = AdminUser(email=email, password_hash=hash_password(password), name=name)
        db.session.add(user)
        logger.info("Created admin %s", email)
    else:
        user.password_hash = hash_password(password)
        if name:
            user.name = name
        user.is_active = True
        logger.info("Updated admin %s", email)
    db.session.commit()
    return user
