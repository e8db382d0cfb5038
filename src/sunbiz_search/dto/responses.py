"""Response DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from sunbiz_search.entities import MatchRecord


class MatchRecordItem(BaseModel):
    """Single located entity (in results array)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Entity name as listed by the registry", min_length=1)
    status: str | None = Field(None, description="Registry status text, e.g. 'Active'")
    document_number: str | None = Field(
        None,
        alias="documentNumber",
        description="Registry document number",
    )
    url: str | None = Field(None, description="Absolute address of the detail page")

    @classmethod
    def from_entity(cls, record: MatchRecord) -> "MatchRecordItem":
        return cls(
            name=record.name,
            status=record.status,
            document_number=record.document_number,
            url=record.url,
        )


class SearchResponse(BaseModel):
    """Response DTO for the search operation."""

    model_config = ConfigDict(populate_by_name=True)

    results: list[MatchRecordItem] = Field(
        default_factory=list,
        description="Matching entities in registry order",
    )
    from_cache: bool = Field(
        ...,
        alias="fromCache",
        description="Whether the results were served from the cache",
    )


class ErrorResponse(BaseModel):
    """Error body shared by every failing request."""

    error: str = Field(..., description="Human-readable error message")
    status: int | None = Field(None, description="Upstream status code, for registry failures")
    details: str | None = Field(None, description="Underlying error, for unexpected failures")


class StatsResponse(BaseModel):
    """Response DTO for cache and lookup statistics."""

    cache: dict[str, float | int] = Field(..., description="Cache size and sizing values")
    search: dict[str, float | int] = Field(..., description="Lookup counters")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_entries: int = Field(..., description="Number of cached lookups", ge=0)
