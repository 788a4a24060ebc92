"""Process-wide cache helpers bound to the current Flask app."""

from __future__ import annotations

import logging
from typing import Callable, Hashable

from flask import current_app

from promocal.core.cache.tagged_cache import MISSING, TaggedCache, path_tag

logger = logging.getLogger(__name__)

CACHE_EXTENSION_KEY = "promocal.cache"


def init_cache(app, clock: Callable[[], float] | None = None) -> TaggedCache:
    """Attach a fresh cache to ``app``."""
    cache = TaggedCache(clock) if clock else TaggedCache()
    app.extensions[CACHE_EXTENSION_KEY] = cache
    return cache


def get_cache() -> TaggedCache:
    return current_app.extensions[CACHE_EXTENSION_KEY]


def revalidate_tag(tag: str) -> int:
    """Invalidate all entries sharing ``tag`` in the app cache."""
    removed = get_cache().invalidate_tag(tag)
    logger.info("Revalidated tag %s (%d entries)", tag, removed)
    return removed


def revalidate_path(path: str) -> int:
    """Mark the rendered output of ``path`` stale."""
    removed = get_cache().invalidate_tag(path_tag(path))
    logger.info("Revalidated path %s (%d entries)", path, removed)
    return removed


def cached_render(path: str, variant: Hashable, ttl: float, render: Callable[[], str]) -> str:
    """Serve rendered output for ``path`` from the cache, rendering on miss."""
    cache = get_cache()
    key = ("render", path, variant)
    body = cache.lookup(key)
    if body is MISSING:
        body = render()
        cache.store(key, body, ttl, (path_tag(path),))
    return body


__all__ = [
    "CACHE_EXTENSION_KEY",
    "TaggedCache",
    "cached_render",
    "get_cache",
    "init_cache",
    "revalidate_path",
    "revalidate_tag",
]
