"""Read queries against the promotion tables."""

from __future__ import annotations

from typing import List, Optional

from promocal.domains.promotions.models import (
    CalendarSettings,
    SpecialPromotion,
    WeeklyPlan,
    WeeklyPromotion,
)
from promocal.extensions import db


def list_weekly_defaults() -> List[WeeklyPromotion]:
    return WeeklyPromotion.query.order_by(WeeklyPromotion.weekday.asc()).all()


def list_weekly_plan(year: int, month: int) -> List[WeeklyPlan]:
    return (
        WeeklyPlan.query.filter_by(year=year, month=month)
        .order_by(WeeklyPlan.weekday.asc())
        .all()
    )


def list_active_specials(year: int, month: int) -> List[SpecialPromotion]:
    return (
        SpecialPromotion.query.filter_by(year=year, month=month, active=True)
        .order_by(SpecialPromotion.day.asc())
        .all()
    )


def get_calendar_settings() -> Optional[CalendarSettings]:
    return CalendarSettings.query.order_by(CalendarSettings.id.asc()).first()


def has_any_active_special() -> bool:
    """True when at least one active special promotion exists, whatever its date."""
    found = db.session.query(SpecialPromotion.id).filter(SpecialPromotion.active.is_(True)).first()
    return found is not None


__all__ = [
    "get_calendar_settings",
    "has_any_active_special",
    "list_active_specials",
    "list_weekly_defaults",
    "list_weekly_plan",
]
