"""Result cache protocol.

Defines the interface for any store that keeps extracted search results
for a short time, keyed by normalized query and result limit.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from sunbiz_search.entities import MatchRecord


@runtime_checkable
class ResultCache(Protocol):
    """Protocol for result cache backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def get(self, key: str) -> tuple[MatchRecord, ...] | None:
        """Look up the records stored under a key.

        Args:
            key: Cache key, ``"<normalized query>:<limit>"``

        Returns:
            The stored records, or None when absent or expired
        """
        ...

    def set(self, key: str, value: Sequence[MatchRecord]) -> None:
        """Store records under a key.

        Args:
            key: Cache key
            value: Records to store
        """
        ...

    def clear(self) -> int:
        """Drop every entry.

        Returns:
            Number of entries removed
        """
        ...

    def get_stats(self) -> dict:
        """Get store statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
