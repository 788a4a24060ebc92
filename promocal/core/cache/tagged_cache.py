"""In-process cache with time-based expiry and tag invalidation."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from functools import wraps
from threading import Lock
from typing import Any, Callable, Dict, FrozenSet, Hashable, Iterable, Tuple

MISSING = object()

PATH_TAG_PREFIX = "_path:"


def path_tag(path: str) -> str:
    """Tag carried by every rendered-output entry for a URL path."""
    return f"{PATH_TAG_PREFIX}{path}"


@dataclass
class _Entry:
    value: Any
    expires_at: float
    tags: FrozenSet[str] = field(default_factory=frozenset)


class TaggedCache:
    """Thread-safe key/value store.

    Entries expire ``ttl`` seconds after they are written, measured with the
    injected ``clock``. Every entry may carry tags; ``invalidate_tag`` drops all
    entries sharing a tag regardless of their remaining lifetime. Concurrent
    misses on the same key may each compute the value; the last write wins.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = Lock()
        self._entries: Dict[Hashable, _Entry] = {}

    def lookup(self, key: Hashable) -> Any:
        """Return the live value for ``key`` or ``MISSING``."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return MISSING
            if entry.expires_at <= now:
                del self._entries[key]
                return MISSING
            return entry.value

    def store(self, key: Hashable, value: Any, ttl: float, tags: Iterable[str] = ()) -> None:
        """Write ``value`` under ``key``; expired entries are swept on every write."""
        if ttl <= 0:
            return
        now = self._clock()
        entry = _Entry(value=value, expires_at=now + ttl, tags=frozenset(tags))
        with self._lock:
            expired = [k for k, e in self._entries.items() if e.expires_at <= now]
            for k in expired:
                del self._entries[k]
            self._entries[key] = entry

    def invalidate_tag(self, tag: str) -> int:
        """Drop every entry carrying ``tag``; returns how many were removed."""
        with self._lock:
            doomed = [key for key, entry in self._entries.items() if tag in entry.tags]
            for key in doomed:
                del self._entries[key]
        return len(doomed)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def memoize(
        self,
        fn: Callable[..., Any],
        key_parts: Tuple[Hashable, ...],
        ttl: float,
        tags: Iterable[str] = (),
    ) -> Callable[..., Any]:
        """Wrap ``fn`` so results are cached under ``key_parts + args``."""
        tag_set = frozenset(tags)

        @wraps(fn)
        def cached(*args: Hashable) -> Any:
            key = (*key_parts, *args)
            value = self.lookup(key)
            if value is MISSING:
                value = fn(*args)
                self.store(key, value, ttl, tag_set)
            return value

        return cached


__all__ = ["MISSING", "PATH_TAG_PREFIX", "TaggedCache", "path_tag"]
