"""Match record domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchRecord:
    """One business entity located on the registry's search-results page.

    Attributes:
        name: Display name of the entity (never empty)
        status: Free-text registry status, e.g. "Active" or "Inactive"
        document_number: Registry identifier of the filing
        url: Absolute address of the entity's detail page
    """

    name: str
    status: str | None = None
    document_number: str | None = None
    url: str | None = None
