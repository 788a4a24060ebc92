"""Cached month fetch for the calendar page."""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple, Optional, Tuple

from promocal.core.cache.tagged_cache import TaggedCache
from promocal.domains.promotions.mappers import promotion_to_row, settings_to_row
from promocal.domains.promotions.schemas import PromotionRow, SettingsRow
from promocal.domains.promotions.services import promotion_repository

logger = logging.getLogger(__name__)

CALENDAR_DATA_TAG = "calendar-calendar-data"
CALENDAR_DATA_KEY = "calendar-data"
DEFAULT_TTL_SECONDS = 300


class CalendarData(NamedTuple):
    weekly_defaults: Tuple[PromotionRow, ...]
    weekly_plan: Tuple[PromotionRow, ...]
    specials: Tuple[PromotionRow, ...]
    settings: Optional[SettingsRow]


def fetch_calendar_data(year: int, month: int) -> CalendarData:
    """Run the four month reads against the store, uncached.

    The reads are independent and not wrapped in a transaction.
    """
    logger.info("Calendar data fetched for %s-%s", year, month)
    return CalendarData(
        weekly_defaults=tuple(promotion_to_row(p) for p in promotion_repository.list_weekly_defaults()),
        weekly_plan=tuple(promotion_to_row(p) for p in promotion_repository.list_weekly_plan(year, month)),
        specials=tuple(promotion_to_row(p) for p in promotion_repository.list_active_specials(year, month)),
        settings=settings_to_row(promotion_repository.get_calendar_settings()),
    )


class CalendarDataCache:
    """Memoizes ``(year, month) -> CalendarData`` under ``CALENDAR_DATA_TAG``."""

    tag = CALENDAR_DATA_TAG

    def __init__(
        self,
        cache: TaggedCache,
        fetcher: Callable[[int, int], CalendarData] = fetch_calendar_data,
        ttl: float = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._cache = cache
        self._get = cache.memoize(fetcher, key_parts=(CALENDAR_DATA_KEY,), ttl=ttl, tags=(CALENDAR_DATA_TAG,))

    def get(self, year: int, month: int) -> CalendarData:
        return self._get(year, month)

    def invalidate(self) -> int:
        return self._cache.invalidate_tag(CALENDAR_DATA_TAG)


__all__ = [
    "CALENDAR_DATA_TAG",
    "CalendarData",
    "CalendarDataCache",
    "fetch_calendar_data",
]
