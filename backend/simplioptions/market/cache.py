"""Thread-safe in-memory TTL cache."""

from __future__ import annotations

import time
from collections.abc import Callable
from threading import Lock
from typing import Any

from .models import CacheEntry, CacheStatistics


class TTLCache:
    """Thread-safe keyed store whose entries expire a fixed time after insertion.

    Expiry is lazy: an entry past its TTL stays in the store until it is
    overwritten, purged via ``purge_expired()``, or cleared. ``lookup()``
    simply refuses to return it.

    Every ``lookup()`` counts as exactly one hit or one miss.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.time) -> None:
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl}")
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0
        self._total_requests = 0

    @property
    def ttl(self) -> float:
        return self._ttl

    def now(self) -> float:
        return self._clock()

    def lookup(self, key: str) -> CacheEntry | None:
        """Return the entry for ``key`` if still valid, counting a hit or a miss."""
        with self._lock:
            self._total_requests += 1
            entry = self._entries.get(key)
            if entry is not None and entry.is_valid(self._clock(), self._ttl):
                self._hits += 1
                return entry
            self._misses += 1
            return None

    def store(self, key: str, value: Any) -> CacheEntry:
        """Insert or overwrite ``key``. Returns the created entry."""
        with self._lock:
            entry = CacheEntry(key=key, value=value, stored_at=self._clock())
            self._entries[key] = entry
            return entry

    def entries(self) -> list[CacheEntry]:
        """Snapshot of all stored entries, valid or not."""
        with self._lock:
            return list(self._entries.values())

    def purge_expired(self) -> int:
        """Drop every entry past its TTL. Returns the number removed."""
        with self._lock:
            now = self._clock()
            expired = [key for key, entry in self._entries.items() if not entry.is_valid(now, self._ttl)]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def clear(self) -> int:
        """Remove all entries and reset statistics. Returns the number removed."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._total_requests = 0
            return removed

    @property
    def stats(self) -> CacheStatistics:
        """Snapshot of the lookup counters."""
        with self._lock:
            return CacheStatistics(
                hits=self._hits,
                misses=self._misses,
                total_requests=self._total_requests,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries
