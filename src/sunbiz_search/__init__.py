"""Sunbiz Search - live company-name lookup with a short-lived result cache.

This package provides a layered architecture for registry lookups:

Layers:
    - protocols: Interface contracts (ResultCache, RegistryClient)
    - repositories: In-memory cache and the Sunbiz HTTP client
    - extractor: Search-results markup to MatchRecord conversion
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from sunbiz_search.repositories import SunbizClient, TTLResultCache
    from sunbiz_search.services import SearchService

    service = SearchService.create(
        cache=TTLResultCache(),
        registry_client=SunbizClient.create(),
    )
    outcome = await service.search("tesla", "7")
    ```

For HTTP API:
    ```python
    from sunbiz_search.api.app import app
    ```
"""

from sunbiz_search.config import settings
from sunbiz_search.entities import MatchRecord, SearchOutcome
from sunbiz_search.exceptions import (
    SunbizSearchError,
    UnexpectedError,
    UpstreamError,
    ValidationError,
)
from sunbiz_search.extractor import extract
from sunbiz_search.handlers import SearchHandler
from sunbiz_search.protocols import RegistryClient, ResultCache
from sunbiz_search.repositories import SunbizClient, TTLResultCache
from sunbiz_search.services import SearchService

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "RegistryClient",
    "ResultCache",
    # Services (business logic)
    "SearchService",
    "extract",
    # Handlers (HTTP)
    "SearchHandler",
    # Repositories (data access)
    "SunbizClient",
    "TTLResultCache",
    # Entities (domain models)
    "MatchRecord",
    "SearchOutcome",
    # Errors
    "SunbizSearchError",
    "ValidationError",
    "UpstreamError",
    "UnexpectedError",
]
