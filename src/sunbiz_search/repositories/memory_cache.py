"""In-memory implementation of ResultCache.

A bounded mapping with per-entry time-to-live. Expiry is checked lazily
on read; when full, the oldest insertion is evicted.
"""

import logging
import threading
import time
from collections.abc import Callable, Sequence

from sunbiz_search.config import CACHE_MAX_ENTRIES, CACHE_TTL_SECONDS
from sunbiz_search.entities import CacheEntry, MatchRecord

logger = logging.getLogger(__name__)


class TTLResultCache:
    """Process-local result cache with TTL and an entry cap.

    This class satisfies the ResultCache protocol through structural
    typing - no explicit inheritance needed.

    Entries live in an insertion-ordered dict, so the first key is always
    the least-recently-inserted one. Access does not refresh the order.

    Example:
        ```python
        cache = TTLResultCache()
        cache.set("tesla:7", records)
        cache.get("tesla:7")  # records, until five minutes have passed
        ```
    """

    def __init__(
        self,
        ttl: float = CACHE_TTL_SECONDS,
        max_entries: int = CACHE_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl: Seconds an entry stays readable after insertion.
            max_entries: Maximum number of entries held at once.
            clock: Time source in seconds, injectable for tests.
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl < 0:
            raise ValueError("ttl must not be negative")

        self._ttl = ttl
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> tuple[MatchRecord, ...] | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if entry.is_expired(self._clock()):
                del self._entries[key]
                logger.debug("Cache entry expired: %s", key)
                return None

            return entry.value

    def set(self, key: str, value: Sequence[MatchRecord]) -> None:
        with self._lock:
            # A re-set is a fresh insertion at the back of the order.
            self._entries.pop(key, None)

            if len(self._entries) >= self._max_entries:
                oldest_key = next(iter(self._entries))
                del self._entries[oldest_key]
                logger.debug("Cache full, evicted: %s", oldest_key)

            self._entries[key] = CacheEntry(
                value=tuple(value),
                expires_at=self._clock() + self._ttl,
            )

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with entry count and the fixed sizing values
        """
        with self._lock:
            entries = len(self._entries)

        return {
            "entries": entries,
            "max_entries": self._max_entries,
            "ttl_seconds": self._ttl,
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def max_entries(self) -> int:
        return self._max_entries
