import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sunbiz_search.api.dependencies import HandlerDep, lifespan
from sunbiz_search.config import settings
from sunbiz_search.dto import ErrorResponse, HealthCheckResponse, SearchResponse, StatsResponse
from sunbiz_search.exceptions import UnexpectedError, UpstreamError, ValidationError
from sunbiz_search.utils import setup_logging

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Sunbiz Search API",
    description="Live company-name lookup against the Florida business registry",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, ErrorResponse(error=exc.message))


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    return _error_response(
        status.HTTP_502_BAD_GATEWAY,
        ErrorResponse(error=exc.message, status=exc.status_code),
    )


@app.exception_handler(UnexpectedError)
async def unexpected_error_handler(request: Request, exc: UnexpectedError) -> JSONResponse:
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error=exc.message, details=exc.details),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    error = UnexpectedError(details=str(exc) or type(exc).__name__)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error=error.message, details=error.details),
    )


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Sunbiz Search API",
        "version": "0.1.0",
        "description": "Live company-name lookup against the Florida business registry",
        "endpoints": {
            "search": "/api/search?q=<name>&limit=<1-10>",
            "stats": "/stats",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get(
    "/api/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def search(handler: HandlerDep, q: str = "", limit: str | None = None) -> SearchResponse:
    """
    Search the registry for entities whose name matches a partial query.

    Args:
        q: Free-text query, at least two significant characters.
        limit: Maximum number of results (1-10, default 7).

    Returns:
        Matching records and whether they came from the cache.
    """
    return await handler.search(q, limit)


@app.get("/stats", response_model=StatsResponse)
async def get_stats(handler: HandlerDep) -> StatsResponse:
    """Get cache and lookup statistics."""
    return await handler.get_stats()


@app.delete("/cache", response_model=dict[str, Any])
async def clear_cache(handler: HandlerDep) -> dict[str, Any]:
    """Clear all entries from the cache."""
    return await handler.clear_cache()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sunbiz_search.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
