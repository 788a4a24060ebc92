"""Promotion domain mappers: model -> cache snapshot converters."""

from __future__ import annotations

from typing import Optional

from promocal.domains.promotions.models import (
    CalendarSettings,
    SpecialPromotion,
    WeeklyPlan,
    WeeklyPromotion,
)
from promocal.domains.promotions.schemas import PromotionRow, SettingsRow
from promocal.domains.promotions.services.translation_service import ordered_translations


def _freeze_translations(raw) -> tuple:
    return tuple((lang, dict(text)) for lang, text in ordered_translations(raw))


def promotion_to_row(promo: WeeklyPromotion | WeeklyPlan | SpecialPromotion) -> PromotionRow:
    """Copy a promotion model into a detached snapshot."""
    return PromotionRow(
        id=promo.id,
        weekday=getattr(promo, "weekday", None),
        year=getattr(promo, "year", None),
        month=getattr(promo, "month", None),
        day=getattr(promo, "day", None),
        icon=promo.icon,
        link=promo.link,
        button=promo.button,
        button_color=promo.button_color,
        category=promo.category,
        active=bool(promo.active),
        title=promo.title,
        rich_html=promo.rich_html,
        translations=_freeze_translations(promo.translations),
    )


def settings_to_row(settings: Optional[CalendarSettings]) -> Optional[SettingsRow]:
    if settings is None:
        return None
    return SettingsRow(bg_image_url=settings.bg_image_url)
