"""Resolve the display text of a promotion for a requested language."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from promocal.domains.promotions.schemas import ResolvedText

TranslationPair = Tuple[str, Mapping[str, Any]]


def ordered_translations(raw: Any) -> List[TranslationPair]:
    """Normalize stored translations into an ordered list of (lang, text) pairs.

    Accepts a mapping ``{lang: {...}}`` (insertion order kept), a list of
    ``{"lang": ..., ...}`` objects, or a list of ``(lang, {...})`` pairs.
    Entries without text are skipped.
    """
    if not raw:
        return []
    if isinstance(raw, Mapping):
        items = list(raw.items())
    else:
        items = []
        for item in raw:
            if isinstance(item, Mapping):
                items.append((item.get("lang"), item))
            elif isinstance(item, (tuple, list)) and len(item) == 2:
                items.append((item[0], item[1]))

    pairs: List[TranslationPair] = []
    for lang, text in items:
        if not lang or not isinstance(text, Mapping):
            continue
        pairs.append((str(lang), text))
    return pairs


def pick_translation(raw: Any, lang: str) -> Optional[Mapping[str, Any]]:
    """Translation for ``lang``, else the first available one, else None.

    The fallback is "first available translation"; no business rule orders
    the languages.
    """
    pairs = ordered_translations(raw)
    for code, text in pairs:
        if code == lang:
            return text
    return pairs[0][1] if pairs else None


def _first_present(*values: Any) -> Optional[str]:
    """First non-None value as text; stored JSON may hold numbers."""
    for value in values:
        if value is not None:
            return value if isinstance(value, str) else str(value)
    return None


def resolve_text(record: Any, lang: str) -> ResolvedText:
    """Resolve ``title``/``button``/``link``/``richHtml`` field by field.

    Non-string translation values are rendered as text (``2024`` -> ``"2024"``).
    """
    chosen = pick_translation(getattr(record, "translations", None), lang) or {}
    title = _first_present(chosen.get("title"), getattr(record, "title", None), "")
    button = _first_present(chosen.get("button"), getattr(record, "button", None), "")
    link = _first_present(chosen.get("link"), getattr(record, "link", None), "#")
    rich_html = _first_present(chosen.get("richHtml"), getattr(record, "rich_html", None))
    return ResolvedText(title=title, button=button, link=link, rich_html=rich_html)


__all__ = ["ordered_translations", "pick_translation", "resolve_text"]
