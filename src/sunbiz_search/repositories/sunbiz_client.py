"""httpx-based client for the Sunbiz corporation search.

Issues one GET per lookup against the registry's entity-name search page,
with browser-like headers. The response body is returned untouched; turning
it into records is the extractor's job.

Key features:
- Lazily created async HTTP client, injectable for tests
- No retries; transport defaults apply for timeouts
"""

import logging

import httpx

from sunbiz_search.config import SEARCH_RESULTS_PATH, settings
from sunbiz_search.entities import RegistryPage

logger = logging.getLogger(__name__)


class SunbizClient:
    """Sunbiz implementation of the RegistryClient protocol.

    This class satisfies the RegistryClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = SunbizClient.create()
        page = await client.fetch_search_page("Tesla")
        print(page.status_code)  # 200
        await client.close()
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the registry client.

        Args:
            base_url: Registry address. Defaults to settings.sunbiz_base_url.
            user_agent: User-Agent header. Defaults to settings.sunbiz_user_agent.
            http_client: Pre-built async client. If None, one is created on first use.
        """
        self._base_url = (base_url or settings.sunbiz_base_url).rstrip("/")
        self._user_agent = user_agent or settings.sunbiz_user_agent
        self._client = http_client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        user_agent: str | None = None,
    ) -> "SunbizClient":
        """Factory method to create SunbizClient with defaults.

        Args:
            base_url: Registry address. If None, uses settings.
            user_agent: User-Agent header. If None, uses settings.

        Returns:
            Configured SunbizClient
        """
        return cls(base_url=base_url, user_agent=user_agent)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(follow_redirects=True)
        return self._client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def search_url(self) -> str:
        return f"{self._base_url}{SEARCH_RESULTS_PATH}"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._user_agent,
            "Accept": "text/html,application/xhtml+xml",
        }

    async def fetch_search_page(self, query: str) -> RegistryPage:
        """Fetch the entity-name search results for a query.

        Args:
            query: The query exactly as the user typed it

        Returns:
            RegistryPage with the upstream status and HTML body

        Raises:
            httpx.HTTPError: On connection, timeout or protocol failures
        """
        params = {"inquiryType": "EntityName", "searchTerm": query}

        logger.info("Fetching Sunbiz results for %r", query)
        response = await self.client.get(
            self.search_url,
            params=params,
            headers=self.headers,
            follow_redirects=True,
        )
        logger.debug("Sunbiz answered %s for %s", response.status_code, response.url)

        return RegistryPage(status_code=response.status_code, text=response.text)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
