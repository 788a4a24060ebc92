"""Promotion domain services."""

from promocal.domains.promotions.services.month_nav import (
    month_label,
    next_month,
    previous_month,
)
from promocal.domains.promotions.services.schedule_service import (
    build_weekly_schedule,
    normalize_specials,
    normalize_weekly_rows,
)
from promocal.domains.promotions.services.translation_service import resolve_text

__all__ = [
    "build_weekly_schedule",
    "month_label",
    "next_month",
    "normalize_specials",
    "normalize_weekly_rows",
    "previous_month",
    "resolve_text",
]
