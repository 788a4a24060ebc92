"""Promotion domain models."""

from promocal.domains.promotions.models.promotion_models import (
    CalendarSettings,
    SpecialPromotion,
    WeeklyPlan,
    WeeklyPromotion,
)

__all__ = ["CalendarSettings", "SpecialPromotion", "WeeklyPlan", "WeeklyPromotion"]
