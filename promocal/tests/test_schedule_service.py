"""Tests for the weekly schedule and special promotion normalizers."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.unit

from promocal.domains.promotions.schemas import PLACEHOLDER_SLOT, PromotionRow, WeeklySlot
from promocal.domains.promotions.services.schedule_service import (
    build_weekly_schedule,
    normalize_specials,
    normalize_weekly_rows,
)


def weekly(weekday, title, **kwargs) -> PromotionRow:
    return PromotionRow(
        weekday=weekday,
        active=kwargs.pop("active", True),
        translations=(("en", {"title": title}),),
        **kwargs,
    )


class TestNormalizeWeeklyRows:
    def test_places_rows_by_weekday(self):
        out = normalize_weekly_rows([weekly(0, "Sun"), weekly(6, "Sat")], "en")
        assert len(out) == 7
        assert out[0].title == "Sun"
        assert out[6].title == "Sat"
        assert out[1:6] == [None] * 5

    @pytest.mark.parametrize("bad", [None, -1, 7, 1.0, True, "1"])
    def test_drops_invalid_weekday(self, bad):
        assert normalize_weekly_rows([weekly(bad, "x")], "en") == [None] * 7

    def test_display_defaults(self):
        slot = normalize_weekly_rows([weekly(2, "Tue", active=None)], "en")[2]
        assert slot.icon == ""
        assert slot.active is False
        assert slot.button_color == "green"
        assert slot.category == "ALL"
        assert slot.link == "#"

    def test_display_fields_copied(self):
        row = weekly(3, "Wed", icon="⚽", button_color="red", category="SPORT")
        slot = normalize_weekly_rows([row], "en")[3]
        assert (slot.icon, slot.button_color, slot.category, slot.active) == ("⚽", "red", "SPORT", True)

    def test_later_row_wins_on_same_weekday(self):
        out = normalize_weekly_rows([weekly(4, "first"), weekly(4, "second")], "en")
        assert out[4].title == "second"

    def test_none_rows(self):
        assert normalize_weekly_rows(None, "en") == [None] * 7


class TestBuildWeeklySchedule:
    def test_always_seven_placeholders_when_empty(self):
        schedule = build_weekly_schedule([], [], "pt")
        assert len(schedule) == 7
        assert all(slot == PLACEHOLDER_SLOT for slot in schedule)

    def test_placeholder_is_inert(self):
        assert PLACEHOLDER_SLOT == WeeklySlot(
            title="",
            icon="",
            rich_html=None,
            link="#",
            button="",
            active=False,
            button_color="green",
            category="ALL",
        )

    def test_override_wins_over_default(self):
        schedule = build_weekly_schedule(
            [weekly(1, "default-mon"), weekly(2, "default-tue")],
            [weekly(1, "override-mon")],
            "en",
        )
        assert schedule[1].title == "override-mon"
        assert schedule[2].title == "default-tue"
        for index in (0, 3, 4, 5, 6):
            assert schedule[index] == PLACEHOLDER_SLOT

    def test_override_without_default(self):
        schedule = build_weekly_schedule([], [weekly(5, "fri")], "en")
        assert schedule[5].title == "fri"

    def test_inactive_override_still_wins(self):
        schedule = build_weekly_schedule([weekly(1, "default")], [weekly(1, "off", active=False)], "en")
        assert schedule[1].title == "off"
        assert schedule[1].active is False


class TestNormalizeSpecials:
    def test_maps_rows_in_input_order(self):
        rows = [
            PromotionRow(year=2024, month=0, day=20, active=True, translations=(("pt", {"title": "B"}),)),
            PromotionRow(year=2024, month=0, day=5, active=True, translations=(("pt", {"title": "A"}),)),
        ]
        entries = normalize_specials(rows, "pt")
        assert [e.day for e in entries] == [20, 5]
        assert [e.title for e in entries] == ["B", "A"]
        assert entries[0].year == 2024
        assert entries[0].month == 0

    def test_keeps_duplicates(self):
        row = PromotionRow(year=2024, month=3, day=1, active=True)
        assert len(normalize_specials([row, row], "en")) == 2

    def test_defaults_and_aliases(self):
        entry = normalize_specials([PromotionRow(year=2024, month=3, day=1)], "en")[0]
        dumped = entry.model_dump(by_alias=True)
        assert dumped["buttonColor"] == "green"
        assert dumped["category"] == "ALL"
        assert dumped["link"] == "#"
        assert dumped["richHtml"] is None
        assert dumped["active"] is False

    def test_empty(self):
        assert normalize_specials(None, "en") == []
