"""Public calendar page."""

from __future__ import annotations

import calendar
from datetime import date

from flask import Blueprint, current_app, render_template, request

from promocal.core.cache import cached_render
from promocal.core.utils.decorators import current_roles_optional
from promocal.domains.promotions.services.page_service import build_calendar_page

calendar_pages_bp = Blueprint("calendar_pages", __name__)

WEEKDAY_LABELS = {
    "pt": ("Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb"),
    "en": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
}


def get_calendar_data_cache():
    return current_app.extensions["promocal.calendar_data"]


def _month_grid(year: int, month: int) -> list[list[int | None]]:
    """Weeks of day numbers for a 0-based month, Sunday first; None pads."""
    weeks = calendar.Calendar(firstweekday=6).monthdayscalendar(year, month + 1)
    return [[day or None for day in week] for week in weeks]


def render_calendar(is_admin: bool) -> str:
    page = build_calendar_page(
        request.args,
        get_calendar_data_cache(),
        today=date.today(),
        is_admin=is_admin,
        allowed_langs=current_app.config["ALLOWED_LANGS"],
        default_lang=current_app.config["DEFAULT_LANG"],
        default_bg_image_url=current_app.config["DEFAULT_BG_IMAGE_URL"],
    )
    specials_by_day: dict[int, list] = {}
    for entry in page.specials:
        if entry.day is not None:
            specials_by_day.setdefault(entry.day, []).append(entry)
    return render_template(
        "calendar/index.html",
        page=page,
        weeks=_month_grid(page.year, page.month),
        specials_by_day=specials_by_day,
        weekday_labels=WEEKDAY_LABELS.get(page.lang, WEEKDAY_LABELS["en"]),
        brand_url=current_app.config["BRAND_URL"],
    )


@calendar_pages_bp.get("/")
def calendar_home():
    """Month grid of weekly and special promotions."""
    is_admin = "admin" in current_roles_optional()
    ttl = current_app.config.get("PAGE_CACHE_SECONDS", 0)
    if ttl <= 0:
        return render_calendar(is_admin)
    variant = (request.query_string.decode("utf-8", "replace"), is_admin)
    return cached_render("/", variant, ttl, lambda: render_calendar(is_admin))
