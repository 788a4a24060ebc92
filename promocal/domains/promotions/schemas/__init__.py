"""Promotion domain schemas: cached row snapshots and display DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

TranslationPairs = Tuple[Tuple[str, Mapping[str, Any]], ...]


@dataclass(frozen=True)
class PromotionRow:
    """Session-independent copy of a promotion row, safe to keep in the cache."""

    id: Optional[int] = None
    weekday: Optional[int] = None
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    icon: Optional[str] = None
    link: Optional[str] = None
    button: Optional[str] = None
    button_color: Optional[str] = None
    category: Optional[str] = None
    active: bool = False
    title: Optional[str] = None
    rich_html: Optional[str] = None
    translations: TranslationPairs = ()


@dataclass(frozen=True)
class SettingsRow:
    bg_image_url: Optional[str] = None


class _DisplayModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ResolvedText(_DisplayModel):
    """Display text of a promotion for one language."""

    title: str = ""
    button: str = ""
    link: str = "#"
    rich_html: Optional[str] = Field(default=None, alias="richHtml")


class WeeklySlot(_DisplayModel):
    title: str = ""
    icon: str = ""
    rich_html: Optional[str] = Field(default=None, alias="richHtml")
    link: str = "#"
    button: str = ""
    active: bool = False
    button_color: str = Field(default="green", alias="buttonColor")
    category: str = "ALL"


class SpecialEntry(_DisplayModel):
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    title: str = ""
    icon: str = ""
    rich_html: Optional[str] = Field(default=None, alias="richHtml")
    link: str = "#"
    button: str = ""
    active: bool = False
    button_color: str = Field(default="green", alias="buttonColor")
    category: str = "ALL"


# Weekday with neither a monthly override nor a weekly default.
PLACEHOLDER_SLOT = WeeklySlot()


class CalendarResponse(BaseModel):
    """JSON body of the calendar API."""

    year: int
    month: int
    lang: str
    show_nav: bool = Field(alias="showNav")
    month_label: str = Field(alias="monthLabel")
    bg_image_url: str = Field(alias="bgImageUrl")
    weekly: list[WeeklySlot]
    specials: list[SpecialEntry]

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "CalendarResponse",
    "PLACEHOLDER_SLOT",
    "PromotionRow",
    "ResolvedText",
    "SettingsRow",
    "SpecialEntry",
    "TranslationPairs",
    "WeeklySlot",
]
