"""Registry client protocol.

Defines the interface for fetching the registry's search-results page.
"""

from typing import Protocol, runtime_checkable

from sunbiz_search.entities import RegistryPage


@runtime_checkable
class RegistryClient(Protocol):
    """Protocol for registry search clients."""

    @property
    def base_url(self) -> str:
        """Address that relative links on the results page resolve against."""
        ...

    async def fetch_search_page(self, query: str) -> RegistryPage:
        """Fetch the search-results page for a query.

        Args:
            query: The query exactly as the user typed it

        Returns:
            RegistryPage with the upstream status and body

        Raises:
            httpx.HTTPError: On transport failures
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
