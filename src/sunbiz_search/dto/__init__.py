"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .responses import (
    ErrorResponse,
    HealthCheckResponse,
    MatchRecordItem,
    SearchResponse,
    StatsResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "MatchRecordItem",
    "SearchResponse",
    "StatsResponse",
]
