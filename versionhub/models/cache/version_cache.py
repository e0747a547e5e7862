"""Version cache implementation."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from versionhub.constants.defaults import VERSION_CACHE_TTL_SECONDS_DEFAULT
from versionhub.constants.limits import MAX_VERSION_CACHE_ENTRIES


class VersionCache:
    """TTL-based cache of available versions keyed by application name.

    Entries are written once per successful fetch and never mutated. All
    access happens on the event loop thread, so reads and writes are plain
    synchronous dict operations. Expired entries are soft-expired (left in
    place) and cleaned up lazily during ``set()`` eviction.

    A ``ttl_seconds`` of 0 disables expiry.
    """

    MAX_ENTRIES = MAX_VERSION_CACHE_ENTRIES

    def __init__(
        self,
        ttl_seconds: float = VERSION_CACHE_TTL_SECONDS_DEFAULT,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: dict[str, dict] = {}
        self._ttl_seconds = ttl_seconds
        self._max_entries = max_entries or self.MAX_ENTRIES
        self._clock = clock

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def _is_expired(self, entry: dict) -> bool:
        if self._ttl_seconds <= 0:
            return False
        return self._clock() - entry["timestamp"] > self._ttl_seconds

    def get(self, app_name: str) -> tuple[str, ...] | None:
        """Get cached versions or None if missing or expired."""
        entry = self._cache.get(app_name)
        if entry is None or self._is_expired(entry):
            return None
        return entry["data"]

    def __contains__(self, app_name: object) -> bool:
        return isinstance(app_name, str) and self.get(app_name) is not None

    def __len__(self) -> int:
        return sum(1 for entry in self._cache.values() if not self._is_expired(entry))

    def set(self, app_name: str, versions: Iterable[str]) -> None:
        """Cache versions with the current timestamp."""
        self._cache[app_name] = {"data": tuple(versions), "timestamp": self._clock()}
        if len(self._cache) > self._max_entries:
            self._evict_expired_then_oldest()

    def _evict_expired_then_oldest(self) -> None:
        """Evict expired entries first, then oldest by timestamp if still over limit."""
        expired_keys = [k for k, entry in self._cache.items() if self._is_expired(entry)]
        for k in expired_keys:
            del self._cache[k]

        while len(self._cache) > self._max_entries:
            oldest_key = min(self._cache, key=lambda k: self._cache[k]["timestamp"])
            del self._cache[oldest_key]

    def pop(self, app_name: str) -> tuple[str, ...] | None:
        """Drop one entry, returning its versions if it was cached."""
        entry = self._cache.pop(app_name, None)
        return None if entry is None else entry["data"]

    def clear(self) -> None:
        """Drop every entry."""
        self._cache.clear()

    def items(self) -> dict[str, tuple[str, ...]]:
        """Return fresh entries as a plain dict."""
        return {
            name: entry["data"]
            for name, entry in self._cache.items()
            if not self._is_expired(entry)
        }
