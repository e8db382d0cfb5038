"""HTTP handlers for lookup operations.

Handlers convert between DTOs (API contracts) and service calls.
Domain errors pass through untouched; anything else is wrapped in
UnexpectedError so the app can render it as a generic server error.
"""

import logging

from sunbiz_search.dto import HealthCheckResponse, MatchRecordItem, SearchResponse, StatsResponse
from sunbiz_search.exceptions import SunbizSearchError, UnexpectedError
from sunbiz_search.services import SearchService

logger = logging.getLogger(__name__)


class SearchHandler:
    """HTTP handlers for lookup operations.

    This handler delegates business logic to SearchService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Turning foreign exceptions into UnexpectedError

    Example:
        ```python
        handler = SearchHandler(search_service=service)

        @app.get("/api/search", response_model=SearchResponse)
        async def search(q: str = "", limit: str | None = None):
            return await handler.search(q, limit)
        ```
    """

    def __init__(self, search_service: SearchService) -> None:
        """Initialize the search handler.

        Args:
            search_service: The search service for business logic (required).
        """
        self._search = search_service

    async def search(self, query: str | None, limit: str | None) -> SearchResponse:
        """Handle GET /api/search requests.

        Args:
            query: Raw ``q`` parameter
            limit: Raw ``limit`` parameter

        Returns:
            SearchResponse with the matching records

        Raises:
            ValidationError: If the query is too short
            UpstreamError: If the registry request did not succeed
            UnexpectedError: For any other failure
        """
        try:
            outcome = await self._search.search(query, limit)
        except SunbizSearchError:
            raise
        except Exception as e:
            logger.exception("Lookup for %r failed", query)
            raise UnexpectedError(details=str(e) or type(e).__name__) from e

        return SearchResponse(
            results=[MatchRecordItem.from_entity(record) for record in outcome.results],
            from_cache=outcome.from_cache,
        )

    async def get_stats(self) -> StatsResponse:
        """Handle GET /stats requests."""
        stats = self._search.get_stats()
        return StatsResponse(cache=stats["cache"], search=stats["search"])

    async def clear_cache(self) -> dict:
        """Handle DELETE /cache requests.

        Returns:
            Dict with clear operation result
        """
        count = self._search.clear_cache()

        return {
            "success": True,
            "deleted_count": count,
            "message": "Cache cleared successfully",
        }

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        stats = self._search.get_stats()

        return HealthCheckResponse(
            status="healthy",
            cache_entries=stats["cache"].get("entries", 0),
        )
