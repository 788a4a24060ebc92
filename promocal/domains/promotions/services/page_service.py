"""Calendar page entry logic: request parameters, business gate, page assembly."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from promocal.domains.promotions.schemas import SpecialEntry, WeeklySlot
from promocal.domains.promotions.services import promotion_repository
from promocal.domains.promotions.services.calendar_data import CalendarDataCache
from promocal.domains.promotions.services.month_nav import month_label, next_month, previous_month
from promocal.domains.promotions.services.schedule_service import (
    build_weekly_schedule,
    normalize_specials,
)

ALLOWED_LANGS: Tuple[str, ...] = ("pt", "en")
DEFAULT_LANG = "pt"
DEFAULT_BG_IMAGE_URL = "/static/img/bg-calendar.svg"

# Calendar dates outside this range cannot be rendered.
MIN_YEAR = 1
MAX_YEAR = 9999

PAGE_HEADINGS = {"pt": "Calendário de Promoções", "en": "Promotion Calendar"}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class PageParams:
    year: int
    month: int
    lang: str
    show_nav: bool


@dataclass
class CalendarPage:
    year: int
    month: int
    lang: str
    show_nav: bool
    weekly: List[WeeklySlot]
    specials: List[SpecialEntry]
    bg_image_url: str
    prev: Tuple[int, int]
    next: Tuple[int, int]
    month_label: str
    heading: str
    is_admin: bool = False
    allowed_langs: Sequence[str] = field(default_factory=lambda: ALLOWED_LANGS)


def get_param(args: Optional[Mapping[str, Any]], key: str) -> Optional[str]:
    """First value of a query parameter; lists yield their first element."""
    if not args:
        return None
    value = args.get(key)
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Leading integer of ``raw`` ("12abc" -> 12), or None."""
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def resolve_page_params(
    args: Optional[Mapping[str, Any]],
    today: date,
    has_active_specials: bool,
    allowed_langs: Sequence[str] = ALLOWED_LANGS,
    default_lang: str = DEFAULT_LANG,
) -> PageParams:
    """Resolve year, month (0-based), language and navigation visibility.

    Year and month fall back to ``today`` independently. A year that parses but
    lies outside ``MIN_YEAR``..``MAX_YEAR`` also falls back, since no month grid
    can be built for it. When no active special
    promotion exists anywhere, navigation is hidden and the current month is
    forced regardless of the request.
    """
    lang_raw = get_param(args, "lang")
    lang = lang_raw if lang_raw in allowed_langs else default_lang

    req_year = parse_int(get_param(args, "y"))
    req_month = parse_int(get_param(args, "m"))

    year = req_year if req_year is not None and MIN_YEAR <= req_year <= MAX_YEAR else today.year
    month = req_month if req_month is not None and 0 <= req_month <= 11 else today.month - 1

    if not has_active_specials:
        year, month = today.year, today.month - 1

    return PageParams(year=year, month=month, lang=lang, show_nav=has_active_specials)


def build_calendar_page(
    args: Optional[Mapping[str, Any]],
    data_cache: CalendarDataCache,
    today: date,
    is_admin: bool = False,
    has_active_specials: Optional[Callable[[], bool]] = None,
    allowed_langs: Sequence[str] = ALLOWED_LANGS,
    default_lang: str = DEFAULT_LANG,
    default_bg_image_url: str = DEFAULT_BG_IMAGE_URL,
) -> CalendarPage:
    """Resolve the request and assemble everything the calendar template needs."""
    check = has_active_specials or promotion_repository.has_any_active_special
    # Gate runs before the month fetch and ignores the requested month.
    params = resolve_page_params(
        args,
        today,
        check(),
        allowed_langs=allowed_langs,
        default_lang=default_lang,
    )

    weekly_defaults, weekly_plan, specials, settings = data_cache.get(params.year, params.month)

    bg_image_url = (settings.bg_image_url if settings else None) or default_bg_image_url

    return CalendarPage(
        year=params.year,
        month=params.month,
        lang=params.lang,
        show_nav=params.show_nav,
        weekly=build_weekly_schedule(weekly_defaults, weekly_plan, params.lang),
        specials=normalize_specials(specials, params.lang),
        bg_image_url=bg_image_url,
        prev=previous_month(params.year, params.month),
        next=next_month(params.year, params.month),
        month_label=month_label(params.year, params.month, params.lang),
        heading=PAGE_HEADINGS.get(params.lang, PAGE_HEADINGS["en"]),
        is_admin=is_admin,
        allowed_langs=tuple(allowed_langs),
    )


__all__ = [
    "ALLOWED_LANGS",
    "CalendarPage",
    "PageParams",
    "build_calendar_page",
    "get_param",
    "parse_int",
    "resolve_page_params",
]
