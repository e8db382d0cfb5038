"""Turn a Sunbiz search-results page into match records.

The registry's markup is not a stable contract, so every rule here is a
heuristic. The one firm guarantee is that extraction never raises: bad
or unexpected markup produces an empty list.

Two passes are made over the document:

1. Table rows. The first cell's first link gives the entity name and
   detail URL, the second cell the document number, and the first cell
   that reads like a status word gives the status.
2. Detail links. Only when pass 1 found nothing, every link pointing at
   a detail page becomes a record with just a name and URL.
"""

import logging
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from sunbiz_search.config import DETAIL_LINK_MARKER
from sunbiz_search.entities import MatchRecord

logger = logging.getLogger(__name__)

# Loose on purpose: may also match a name or heading cell.
STATUS_PATTERN = re.compile(r"active|inactive|inact|in active|status", re.IGNORECASE)


def extract(markup: str, base_url: str) -> list[MatchRecord]:
    """Extract match records from a search-results page.

    Args:
        markup: Raw HTML of the results page
        base_url: Address that relative links are resolved against

    Returns:
        Records in document order; empty if nothing could be recognised
    """
    try:
        soup = BeautifulSoup(markup or "", "html.parser")

        records = _extract_table_rows(soup, base_url)
        if not records:
            records = _extract_detail_links(soup, base_url)

        return records
    except Exception:
        logger.warning("Could not extract records from results page", exc_info=True)
        return []


def _extract_table_rows(soup: BeautifulSoup, base_url: str) -> list[MatchRecord]:
    records = []

    for row in soup.select("table tr"):
        if _is_header_row(row):
            continue

        cells = row.find_all("td")
        if not cells:
            continue

        anchor = cells[0].find("a")
        name = _text(anchor)
        if not name:
            continue

        document_number = _text(cells[1]) if len(cells) > 1 else ""

        records.append(
            MatchRecord(
                name=name,
                status=_find_status(cells),
                document_number=document_number or None,
                url=_resolve(anchor.get("href"), base_url),
            )
        )

    return records


def _extract_detail_links(soup: BeautifulSoup, base_url: str) -> list[MatchRecord]:
    records = []

    for anchor in soup.select(f'a[href*="{DETAIL_LINK_MARKER}"]'):
        name = _text(anchor)
        url = _resolve(anchor.get("href"), base_url)
        if name and url:
            records.append(MatchRecord(name=name, url=url))

    return records


def _is_header_row(row: Tag) -> bool:
    section = row.find_parent(["thead", "table"])
    return section is not None and section.name == "thead"


def _find_status(cells: list[Tag]) -> str | None:
    for cell in cells:
        text = _text(cell)
        if STATUS_PATTERN.search(text):
            return text
    return None


def _text(element: Tag | None) -> str:
    if element is None:
        return ""
    return element.get_text().strip()


def _resolve(href: str | list[str] | None, base_url: str) -> str | None:
    """Resolve a link target against the registry address.

    Returns None for missing or unparsable targets.
    """
    if not isinstance(href, str) or not href.strip():
        return None
    try:
        return urljoin(base_url, href.strip())
    except ValueError:
        logger.debug("Ignoring unresolvable link target: %r", href)
        return None
