"""Typed schemas for admin auth IO."""

from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from promocal.core.auth.models import AdminUser


class LoginRequest(BaseModel):
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)


class AdminUserResponse(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    role_codes: List[str] = []

    model_config = ConfigDict(from_attributes=True)


def serialize_admin(user: "AdminUser") -> AdminUserResponse:
    return AdminUserResponse.model_validate(user)
