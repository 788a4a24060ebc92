"""Month pagination helpers. Months are 0-based (January = 0)."""

from __future__ import annotations

from typing import Tuple

MONTH_NAMES = {
    "pt": (
        "janeiro", "fevereiro", "março", "abril", "maio", "junho",
        "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}


def previous_month(year: int, month: int) -> Tuple[int, int]:
    return (year - 1, 11) if month == 0 else (year, month - 1)


def next_month(year: int, month: int) -> Tuple[int, int]:
    return (year + 1, 0) if month == 11 else (year, month + 1)


def month_label(year: int, month: int, lang: str) -> str:
    """Capitalized long month name; Portuguese for ``pt``, English otherwise."""
    names = MONTH_NAMES["pt"] if lang == "pt" else MONTH_NAMES["en"]
    raw = names[month % 12]
    return raw[:1].upper() + raw[1:]


__all__ = ["month_label", "next_month", "previous_month"]
