"""Service layer for business logic.

Services depend on protocols, not on concrete repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .search_service import SearchService, cache_key, normalize_query, parse_limit

__all__ = [
    "SearchService",
    "cache_key",
    "normalize_query",
    "parse_limit",
]
