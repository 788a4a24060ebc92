"""Calendar JSON API: the same resolved month the page renders."""

from __future__ import annotations

from datetime import date

from flask import Blueprint, current_app, jsonify, request

from promocal.domains.promotions.controllers.calendar_pages import get_calendar_data_cache
from promocal.domains.promotions.schemas import CalendarResponse
from promocal.domains.promotions.services.page_service import build_calendar_page
from promocal.extensions import limiter

calendar_api_bp = Blueprint("calendar_api", __name__)


@calendar_api_bp.get("")
@limiter.limit("240/minute")
def get_calendar():
    """
    Resolved calendar month.

    Query Parameters:
    - y: year (optional, defaults to the current year)
    - m: 0-based month (optional, defaults to the current month)
    - lang: one of ALLOWED_LANGS (optional)
    """
    page = build_calendar_page(
        request.args,
        get_calendar_data_cache(),
        today=date.today(),
        allowed_langs=current_app.config["ALLOWED_LANGS"],
        default_lang=current_app.config["DEFAULT_LANG"],
        default_bg_image_url=current_app.config["DEFAULT_BG_IMAGE_URL"],
    )
    body = CalendarResponse(
        year=page.year,
        month=page.month,
        lang=page.lang,
        show_nav=page.show_nav,
        month_label=page.month_label,
        bg_image_url=page.bg_image_url,
        weekly=page.weekly,
        specials=page.specials,
    )
    return jsonify({"ok": True, "calendar": body.model_dump(by_alias=True)}), 200
