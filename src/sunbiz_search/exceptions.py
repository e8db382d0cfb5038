"""Error taxonomy for registry lookups.

Each error carries the message that is rendered to API callers; the
FastAPI app maps the classes to status codes.
"""


class SunbizSearchError(Exception):
    """Base exception for all lookup errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SunbizSearchError):
    """Raised when the query is too short to search for."""

    pass


class UpstreamError(SunbizSearchError):
    """Raised when the registry answers with a non-success status."""

    def __init__(self, status_code: int, message: str = "Failed to fetch Sunbiz results.") -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedError(SunbizSearchError):
    """Raised for any other failure (network, parsing, programming errors)."""

    def __init__(
        self,
        message: str = "Unexpected error while searching Sunbiz.",
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details
