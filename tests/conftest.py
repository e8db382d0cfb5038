"""
Shared fixtures for the lookup tests.
"""

import pytest

from sunbiz_search.entities import RegistryPage

BASE_URL = "https://search.sunbiz.org"

TESLA_PAGE = """
<html>
  <body>
    <div id="search-results">
      <table>
        <thead>
          <tr><th>Corporate Name</th><th>Document Number</th><th>Status</th></tr>
        </thead>
        <tbody>
          <tr>
            <td><a href="/Inquiry/CorporationSearch/SearchResultDetail?inquirytype=EntityName&amp;aggregateId=flal-p12000012345">TESLA LLC</a></td>
            <td>P12000012345</td>
            <td>ACTIVE</td>
          </tr>
        </tbody>
      </table>
    </div>
  </body>
</html>
"""


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRegistryClient:
    """Registry client returning a canned page and recording queries."""

    def __init__(self, page: RegistryPage | None = None, error: Exception | None = None) -> None:
        self.page = page or RegistryPage(status_code=200, text=TESLA_PAGE)
        self.error = error
        self.queries: list[str] = []
        self.closed = False

    @property
    def base_url(self) -> str:
        return BASE_URL

    async def fetch_search_page(self, query: str) -> RegistryPage:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.page

    async def close(self) -> None:
        self.closed = True


def results_page(rows: int) -> str:
    """Build a results table with ``rows`` entities."""
    body = "".join(
        f'<tr><td><a href="/Inquiry/CorporationSearch/SearchResultDetail?id={i}">ACME {i} INC</a></td>'
        f"<td>P{i:011d}</td><td>Active</td></tr>"
        for i in range(rows)
    )
    return f"<table><tbody>{body}</tbody></table>"


@pytest.fixture
def clock():
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def registry():
    """Create a fake registry client serving the TESLA page."""
    return FakeRegistryClient()
