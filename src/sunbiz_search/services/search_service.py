"""Search service for core business logic.

This service orchestrates one lookup by coordinating the result cache
(repository), the registry client (outbound fetch) and the extractor.
"""

import logging
import time

from sunbiz_search.config import DEFAULT_LIMIT, MAX_LIMIT, MIN_LIMIT, MIN_QUERY_LENGTH
from sunbiz_search.entities import SearchOutcome
from sunbiz_search.exceptions import UpstreamError, ValidationError
from sunbiz_search.extractor import extract
from sunbiz_search.metrics import SearchMetrics
from sunbiz_search.protocols import RegistryClient, ResultCache

logger = logging.getLogger(__name__)


def normalize_query(query: str) -> str:
    """Trim and lowercase a query for use in cache keys."""
    return query.strip().lower()


def parse_limit(raw_limit: str | int | None) -> int:
    """Parse a requested result count.

    Unparsable or missing values fall back to DEFAULT_LIMIT; everything
    else is clamped to [MIN_LIMIT, MAX_LIMIT].
    """
    if raw_limit is None:
        return DEFAULT_LIMIT
    try:
        limit = int(raw_limit)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    return max(MIN_LIMIT, min(MAX_LIMIT, limit))


def cache_key(normalized_query: str, limit: int) -> str:
    return f"{normalized_query}:{limit}"


class SearchService:
    """Core lookup orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - ResultCache: the in-memory TTL cache, or any other store
    - RegistryClient: the Sunbiz HTTP client, or a fake in tests

    Example:
        ```python
        from sunbiz_search.repositories import SunbizClient, TTLResultCache
        from sunbiz_search.services import SearchService

        service = SearchService.create(
            cache=TTLResultCache(),
            registry_client=SunbizClient.create(),
        )
        outcome = await service.search("Tesla", "5")
        ```
    """

    def __init__(
        self,
        cache: ResultCache,
        registry_client: RegistryClient,
        metrics: SearchMetrics | None = None,
    ) -> None:
        """Initialize the search service.

        Args:
            cache: Result store (required).
            registry_client: Outbound registry client (required).
            metrics: Counters to record into. A fresh instance if None.
        """
        self._cache = cache
        self._registry = registry_client
        self._metrics = metrics or SearchMetrics()

    @classmethod
    def create(
        cls,
        cache: ResultCache,
        registry_client: RegistryClient,
    ) -> "SearchService":
        """Factory method to create SearchService.

        Args:
            cache: Result store (required).
            registry_client: Outbound registry client (required).

        Returns:
            Configured SearchService instance
        """
        return cls(cache=cache, registry_client=registry_client)

    async def search(self, raw_query: str | None, raw_limit: str | int | None = None) -> SearchOutcome:
        """Look up registered entities matching a partial name.

        Business logic:
        1. Normalize the query and parse the limit
        2. Reject queries shorter than MIN_QUERY_LENGTH
        3. Serve from cache when possible
        4. Otherwise fetch the registry page with the query as typed,
           extract records and cache all of them

        Args:
            raw_query: The query as typed by the user
            raw_limit: Requested number of results, possibly unparsable

        Returns:
            SearchOutcome with at most ``limit`` records

        Raises:
            ValidationError: If the normalized query is too short
            UpstreamError: If the registry answers with a non-success status
            httpx.HTTPError: On transport failures
        """
        query = raw_query or ""
        normalized = normalize_query(query)
        limit = parse_limit(raw_limit)

        if len(normalized) < MIN_QUERY_LENGTH:
            raise ValidationError(f"Query must be at least {MIN_QUERY_LENGTH} characters.")

        key = cache_key(normalized, limit)
        cached = self._cache.get(key)
        if cached is not None:
            self._metrics.record_hit()
            logger.debug("Cache hit for %s", key)
            return SearchOutcome(results=tuple(cached[:limit]), from_cache=True)

        self._metrics.record_miss()
        logger.debug("Cache miss for %s", key)

        start_time = time.time()
        page = await self._registry.fetch_search_page(query)
        fetch_time_ms = (time.time() - start_time) * 1000
        self._metrics.record_fetch(fetch_time_ms, success=page.is_success)

        if not page.is_success:
            logger.warning("Sunbiz returned status %s for %r", page.status_code, query)
            raise UpstreamError(status_code=page.status_code)

        records = extract(page.text, self._registry.base_url)
        logger.info("Extracted %d records for %r in %.0f ms", len(records), query, fetch_time_ms)

        self._cache.set(key, records)
        return SearchOutcome(results=tuple(records[:limit]), from_cache=False)

    def clear_cache(self) -> int:
        """Clear all cached results.

        Returns:
            Number of entries deleted
        """
        return self._cache.clear()

    def get_stats(self) -> dict:
        """Get cache and lookup statistics.

        Returns:
            Dictionary with ``cache`` and ``search`` sections
        """
        return {
            "cache": self._cache.get_stats(),
            "search": self._metrics.to_dict(),
        }

    @property
    def cache(self) -> ResultCache:
        """Get the underlying cache (for testing)."""
        return self._cache

    @property
    def registry_client(self) -> RegistryClient:
        """Get the underlying registry client (for testing)."""
        return self._registry

    @property
    def metrics(self) -> SearchMetrics:
        return self._metrics
