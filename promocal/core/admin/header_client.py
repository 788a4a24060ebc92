"""HTTP client behind the admin header: identity, cache clearing, logout.

Mirrors what the back-office header does in the browser so the same flows can
be driven from the command line or from tests.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
TOAST_SECONDS = 3.0
CSRF_COOKIE_NAME = "csrf_access_token"

MSG_CLEARED = "Cache cleared successfully."
MSG_CLEAR_FAILED = "Failed to clear cache. Please try again."
MSG_CLEAR_ERROR = "Something went wrong while clearing the cache."


@dataclass(frozen=True)
class Toast:
    message: str
    kind: str  # "success" | "error"
    shown_at: float

    def expired(self, now: float) -> bool:
        return now - self.shown_at >= TOAST_SECONDS


class AdminHeaderClient:
    """Stateful client for one admin browsing session."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self._clock = clock
        self.user: Optional[Dict[str, Any]] = None
        self.is_clearing = False
        self._toast: Optional[Toast] = None

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _csrf_headers(self) -> Dict[str, str]:
        token = self.session.cookies.get(CSRF_COOKIE_NAME)
        return {"X-CSRF-TOKEN": token} if token else {}

    def login(self, email: str, password: str) -> bool:
        resp = self.session.post(
            self._url("/api/auth"),
            json={"email": email, "password": password},
            timeout=self.timeout,
        )
        return resp.ok

    def load_me(self) -> Optional[Dict[str, Any]]:
        """Fetch the current admin; any failure leaves ``user`` unset."""
        try:
            resp = self.session.get(
                self._url("/api/admin/me"),
                headers={"Cache-Control": "no-store"},
                timeout=self.timeout,
            )
            if not resp.ok:
                return None
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Admin identity lookup failed: %s", exc)
            return None
        self.user = data.get("user", data) if isinstance(data, dict) else None
        return self.user

    @property
    def display_name(self) -> str:
        user = self.user or {}
        if user.get("name"):
            return user["name"]
        email = user.get("email") or ""
        local_part = email.split("@")[0]
        return local_part or "Admin"

    def show_toast(self, message: str, kind: str = "success") -> Toast:
        self._toast = Toast(message=message, kind=kind, shown_at=self._clock())
        return self._toast

    @property
    def toast(self) -> Optional[Toast]:
        """The visible toast; dismissed automatically after ``TOAST_SECONDS``."""
        if self._toast and self._toast.expired(self._clock()):
            self._toast = None
        return self._toast

    def clear_cache(self) -> Toast:
        self.is_clearing = True
        try:
            resp = self.session.post(
                self._url("/api/admin/clear-calendar-cache"),
                headers=self._csrf_headers(),
                timeout=self.timeout,
            )
            if not resp.ok:
                return self.show_toast(MSG_CLEAR_FAILED, "error")
            return self.show_toast(MSG_CLEARED, "success")
        except requests.RequestException as exc:
            logger.error("Cache clear request failed: %s", exc)
            return self.show_toast(MSG_CLEAR_ERROR, "error")
        finally:
            self.is_clearing = False

    def logout(self) -> str:
        """Log out and return where to navigate; the target never depends on the call."""
        try:
            resp = self.session.delete(
                self._url("/api/auth"),
                headers=self._csrf_headers(),
                timeout=self.timeout,
            )
            logger.info("Logout finished with status %s", resp.status_code)
        except requests.RequestException as exc:
            logger.warning("Logout request failed: %s", exc)
        finally:
            self.user = None
            self.session.cookies.clear()
        return LOGIN_PATH
