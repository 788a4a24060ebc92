"""Tests for calendar page parameter resolution and page assembly."""

from __future__ import annotations

from datetime import date

import pytest

pytestmark = pytest.mark.unit

from promocal.core.cache.tagged_cache import TaggedCache
from promocal.domains.promotions.schemas import PLACEHOLDER_SLOT, PromotionRow, SettingsRow
from promocal.domains.promotions.services.calendar_data import CalendarData, CalendarDataCache
from promocal.domains.promotions.services.page_service import (
    build_calendar_page,
    get_param,
    parse_int,
    resolve_page_params,
)

TODAY = date(2026, 10, 19)


class TestParseInt:
    @pytest.mark.parametrize(
        "raw,expected",
        [("2024", 2024), (" 7", 7), ("12abc", 12), ("-1", -1), ("+3", 3), ("", None), ("abc", None), (None, None)],
    )
    def test_leading_integer(self, raw, expected):
        assert parse_int(raw) == expected


def test_get_param_takes_first_of_list():
    assert get_param({"y": ["2023", "2024"]}, "y") == "2023"
    assert get_param({"y": []}, "y") is None
    assert get_param(None, "y") is None


class TestResolvePageParams:
    def test_valid_request(self):
        params = resolve_page_params({"y": "2024", "m": "0", "lang": "en"}, TODAY, True)
        assert (params.year, params.month, params.lang, params.show_nav) == (2024, 0, "en", True)

    def test_defaults(self):
        params = resolve_page_params({}, TODAY, True)
        assert (params.year, params.month, params.lang) == (2026, 9, "pt")

    def test_unknown_language_falls_back(self):
        assert resolve_page_params({"lang": "de"}, TODAY, True).lang == "pt"

    @pytest.mark.parametrize("m", ["12", "-1", "x", ""])
    def test_invalid_month_uses_current_month_only(self, m):
        params = resolve_page_params({"y": "2024", "m": m}, TODAY, True)
        assert (params.year, params.month) == (2024, 9)

    def test_invalid_year_uses_current_year_only(self):
        params = resolve_page_params({"y": "abc", "m": "3"}, TODAY, True)
        assert (params.year, params.month) == (2026, 3)

    @pytest.mark.parametrize("y", ["0", "-5", "10000"])
    def test_unrenderable_year_uses_current_year(self, y):
        params = resolve_page_params({"y": y, "m": "3"}, TODAY, True)
        assert (params.year, params.month) == (2026, 3)

    def test_no_active_specials_forces_current_month_and_hides_nav(self):
        params = resolve_page_params({"y": "2020", "m": "5", "lang": "en"}, TODAY, False)
        assert (params.year, params.month) == (2026, 9)
        assert params.show_nav is False
        assert params.lang == "en"


def _cache_with(data: CalendarData, calls: list) -> CalendarDataCache:
    def fetch(year, month):
        calls.append((year, month))
        return data

    return CalendarDataCache(TaggedCache(), fetcher=fetch, ttl=300)


def _weekly(weekday, title) -> PromotionRow:
    return PromotionRow(weekday=weekday, active=True, translations=(("en", {"title": title}),))


class TestBuildCalendarPage:
    def test_end_to_end_weekly_merge(self):
        data = CalendarData(
            weekly_defaults=(_weekly(1, "default-mon"), _weekly(2, "default-tue")),
            weekly_plan=(_weekly(1, "override-mon"),),
            specials=(),
            settings=None,
        )
        calls = []
        page = build_calendar_page(
            {"y": "2024", "m": "0", "lang": "en"},
            _cache_with(data, calls),
            TODAY,
            has_active_specials=lambda: True,
        )
        assert calls == [(2024, 0)]
        assert page.weekly[1].title == "override-mon"
        assert page.weekly[2].title == "default-tue"
        for index in (0, 3, 4, 5, 6):
            assert page.weekly[index] == PLACEHOLDER_SLOT
        assert page.month_label == "January"
        assert page.prev == (2023, 11)
        assert page.next == (2024, 1)
        assert page.heading == "Promotion Calendar"
        assert page.show_nav is True

    def test_gate_checked_before_fetch_and_forces_current_month(self):
        order = []
        data = CalendarData((), (), (), None)

        def fetch(year, month):
            order.append(("fetch", year, month))
            return data

        def gate():
            order.append(("gate",))
            return False

        page = build_calendar_page(
            {"y": "2020", "m": "1"},
            CalendarDataCache(TaggedCache(), fetcher=fetch),
            TODAY,
            has_active_specials=gate,
        )
        assert order == [("gate",), ("fetch", 2026, 9)]
        assert (page.year, page.month, page.show_nav) == (2026, 9, False)
        assert page.heading == "Calendário de Promoções"
        assert page.month_label == "Outubro"

    def test_background_fallback(self):
        page = build_calendar_page({}, _cache_with(CalendarData((), (), (), None), []), TODAY, has_active_specials=lambda: True)
        assert page.bg_image_url == "/static/img/bg-calendar.svg"

        page = build_calendar_page(
            {},
            _cache_with(CalendarData((), (), (), SettingsRow(bg_image_url="")), []),
            TODAY,
            has_active_specials=lambda: True,
            default_bg_image_url="/bg.png",
        )
        assert page.bg_image_url == "/bg.png"

    def test_background_from_settings(self):
        data = CalendarData((), (), (), SettingsRow(bg_image_url="https://cdn/bg.jpg"))
        page = build_calendar_page({}, _cache_with(data, []), TODAY, has_active_specials=lambda: True)
        assert page.bg_image_url == "https://cdn/bg.jpg"

    def test_specials_resolved_for_language(self):
        special = PromotionRow(
            year=2024,
            month=0,
            day=15,
            active=True,
            translations=(("pt", {"title": "Dia"}), ("en", {"title": "Day"})),
        )
        data = CalendarData((), (), (special,), None)
        page = build_calendar_page(
            {"y": "2024", "m": "0", "lang": "en"}, _cache_with(data, []), TODAY, has_active_specials=lambda: True
        )
        assert [(s.day, s.title) for s in page.specials] == [(15, "Day")]

    def test_repeated_requests_hit_cache(self):
        calls = []
        cache = _cache_with(CalendarData((), (), (), None), calls)
        for _ in range(3):
            build_calendar_page({"y": "2024", "m": "4"}, cache, TODAY, has_active_specials=lambda: True)
        assert calls == [(2024, 4)]
