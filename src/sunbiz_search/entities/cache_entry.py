"""Cache entry domain entity."""

from dataclasses import dataclass

from .match_record import MatchRecord


@dataclass(frozen=True)
class CacheEntry:
    """Extracted records held by the result cache.

    Attributes:
        value: The records stored for one query/limit key
        expires_at: Clock reading after which the entry is stale
    """

    value: tuple[MatchRecord, ...]
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at
