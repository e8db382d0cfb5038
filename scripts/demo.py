#!/usr/bin/env python3
"""
Demo script for the Sunbiz lookup.

Runs the same lookup twice against the live registry: the first call
fetches and extracts, the second is served from the cache.

Usage:
    python scripts/demo.py "tesla" 5
"""

import asyncio
import sys
import time

from sunbiz_search.repositories import SunbizClient, TTLResultCache
from sunbiz_search.services import SearchService
from sunbiz_search.utils import setup_logging


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def run_lookup(query: str, limit: str | None) -> None:
    """Look a name up twice and print both outcomes."""
    client = SunbizClient.create()
    service = SearchService.create(cache=TTLResultCache(), registry_client=client)

    try:
        for attempt in ("First lookup", "Second lookup"):
            print_section(f"{attempt}: {query!r}")

            start_time = time.time()
            outcome = await service.search(query, limit)
            elapsed_ms = (time.time() - start_time) * 1000

            print(f"  from cache: {outcome.from_cache}  ({elapsed_ms:.1f} ms)")
            for record in outcome.results:
                print(f"  • {record.name}")
                print(f"      document: {record.document_number or '-'}  status: {record.status or '-'}")
                if record.url:
                    print(f"      {record.url}")

        print_section("Stats")
        print(f"  {service.get_stats()}")
    finally:
        await client.close()


def main() -> None:
    """Run the demo."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    setup_logging("INFO")
    query = sys.argv[1]
    limit = sys.argv[2] if len(sys.argv) > 2 else None
    asyncio.run(run_lookup(query, limit))


if __name__ == "__main__":
    main()
