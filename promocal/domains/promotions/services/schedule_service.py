"""Turn raw promotion rows into the weekly schedule and special-day entries."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from promocal.domains.promotions.schemas import PLACEHOLDER_SLOT, SpecialEntry, WeeklySlot
from promocal.domains.promotions.services.translation_service import resolve_text

DAYS_IN_WEEK = 7
DEFAULT_BUTTON_COLOR = "green"
DEFAULT_CATEGORY = "ALL"


def _valid_weekday(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < DAYS_IN_WEEK


def _display_fields(row: Any) -> dict:
    return {
        "icon": getattr(row, "icon", None) or "",
        "active": bool(getattr(row, "active", False)),
        "button_color": getattr(row, "button_color", None) or DEFAULT_BUTTON_COLOR,
        "category": getattr(row, "category", None) or DEFAULT_CATEGORY,
    }


def normalize_weekly_rows(rows: Optional[Iterable[Any]], lang: str) -> List[Optional[WeeklySlot]]:
    """Place rows at their weekday index; rows without a valid weekday are dropped."""
    out: List[Optional[WeeklySlot]] = [None] * DAYS_IN_WEEK
    for row in rows or ():
        weekday = getattr(row, "weekday", None)
        if not _valid_weekday(weekday):
            continue
        text = resolve_text(row, lang)
        out[weekday] = WeeklySlot(
            title=text.title,
            rich_html=text.rich_html,
            link=text.link,
            button=text.button,
            **_display_fields(row),
        )
    return out


def build_weekly_schedule(
    defaults: Optional[Iterable[Any]],
    overrides: Optional[Iterable[Any]],
    lang: str,
) -> List[WeeklySlot]:
    """Seven slots: the month's override, else the weekly default, else a placeholder."""
    default_slots = normalize_weekly_rows(defaults, lang)
    override_slots = normalize_weekly_rows(overrides, lang)
    return [
        override_slots[i] or default_slots[i] or PLACEHOLDER_SLOT
        for i in range(DAYS_IN_WEEK)
    ]


def normalize_specials(rows: Optional[Iterable[Any]], lang: str) -> List[SpecialEntry]:
    """One entry per row, in input order."""
    entries: List[SpecialEntry] = []
    for row in rows or ():
        text = resolve_text(row, lang)
        entries.append(
            SpecialEntry(
                year=getattr(row, "year", None),
                month=getattr(row, "month", None),
                day=getattr(row, "day", None),
                title=text.title,
                rich_html=text.rich_html,
                link=text.link,
                button=text.button,
                **_display_fields(row),
            )
        )
    return entries


__all__ = [
    "DAYS_IN_WEEK",
    "build_weekly_schedule",
    "normalize_specials",
    "normalize_weekly_rows",
]
