"""
Tests for lookup orchestration.
"""

import asyncio

import httpx
import pytest

from conftest import FakeRegistryClient, results_page
from sunbiz_search.entities import MatchRecord, RegistryPage
from sunbiz_search.exceptions import UpstreamError, ValidationError
from sunbiz_search.repositories import TTLResultCache
from sunbiz_search.services import SearchService, cache_key, normalize_query, parse_limit


@pytest.fixture
def cache(clock):
    """Create an isolated cache."""
    return TTLResultCache(clock=clock)


@pytest.fixture
def service(cache, registry):
    """Create a service over the fake registry."""
    return SearchService.create(cache=cache, registry_client=registry)


def run(coro):
    return asyncio.run(coro)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 7),
        ("", 7),
        ("abc", 7),
        ("2.5", 7),
        ("0", 1),
        ("-3", 1),
        ("15", 10),
        ("10", 10),
        (" 4 ", 4),
        (3, 3),
    ],
)
def test_parse_limit(raw, expected):
    """Test limit parsing, defaulting and clamping."""
    assert parse_limit(raw) == expected


def test_normalize_query_and_key():
    """Test cache key construction from a raw query."""
    assert normalize_query("  TeSLa Motors ") == "tesla motors"
    assert cache_key("tesla", 7) == "tesla:7"


@pytest.mark.parametrize("query", ["a", "", "   ", " b ", None])
def test_short_query_rejected(service, registry, cache, query):
    """Test validation failure without remote call or cache write."""
    with pytest.raises(ValidationError) as exc_info:
        run(service.search(query, "7"))

    assert exc_info.value.message == "Query must be at least 2 characters."
    assert registry.queries == []
    assert len(cache) == 0


def test_miss_fetches_and_caches(service, registry, cache):
    """Test the miss path end to end."""
    outcome = run(service.search("tesla", "7"))

    assert outcome.from_cache is False
    assert outcome.results == (
        MatchRecord(
            name="TESLA LLC",
            status="ACTIVE",
            document_number="P12000012345",
            url=(
                "https://search.sunbiz.org/Inquiry/CorporationSearch/SearchResultDetail"
                "?inquirytype=EntityName&aggregateId=flal-p12000012345"
            ),
        ),
    )
    assert registry.queries == ["tesla"]
    assert cache.get("tesla:7") == outcome.results


def test_second_call_is_cache_hit(service, registry):
    """Test that an immediate repeat performs no second fetch."""
    first = run(service.search("tesla", "7"))
    second = run(service.search("tesla", "7"))

    assert registry.queries == ["tesla"]
    assert second.from_cache is True
    assert second.results == first.results


def test_original_query_sent_upstream(service, registry, cache):
    """Test that the registry sees the query as typed, not normalized."""
    run(service.search("  Tesla Motors ", None))

    assert registry.queries == ["  Tesla Motors "]
    assert cache.get("tesla motors:7") is not None


def test_queries_differing_in_case_share_cache(service, registry):
    """Test that normalization makes case variants hit the same entry."""
    run(service.search("TESLA", "7"))
    outcome = run(service.search("tesla ", "7"))

    assert outcome.from_cache is True
    assert registry.queries == ["TESLA"]


def test_limit_is_part_of_the_key(service, registry):
    """Test that different limits are cached separately."""
    run(service.search("tesla", "7"))
    outcome = run(service.search("tesla", "3"))

    assert outcome.from_cache is False
    assert len(registry.queries) == 2


def test_results_trimmed_but_full_list_cached(cache):
    """Test slicing to the limit while caching every extracted record."""
    registry = FakeRegistryClient(RegistryPage(status_code=200, text=results_page(12)))
    service = SearchService.create(cache=cache, registry_client=registry)

    outcome = run(service.search("acme", "15"))

    assert len(outcome.results) == 10
    assert len(cache.get("acme:10")) == 12

    hit = run(service.search("acme", "15"))
    assert hit.from_cache is True
    assert len(hit.results) == 10


def test_empty_extraction_is_cached(cache):
    """Test that a page without results is a successful, cacheable lookup."""
    registry = FakeRegistryClient(RegistryPage(status_code=200, text="<p>No records</p>"))
    service = SearchService.create(cache=cache, registry_client=registry)

    assert run(service.search("zzzz", None)).results == ()
    assert run(service.search("zzzz", None)).from_cache is True
    assert registry.queries == ["zzzz"]


def test_upstream_failure(cache):
    """Test that a non-success status raises UpstreamError and caches nothing."""
    registry = FakeRegistryClient(RegistryPage(status_code=503, text="Service Unavailable"))
    service = SearchService.create(cache=cache, registry_client=registry)

    with pytest.raises(UpstreamError) as exc_info:
        run(service.search("tesla", "7"))

    assert exc_info.value.status_code == 503
    assert len(cache) == 0
    assert service.metrics.upstream_failures == 1


def test_transport_error_propagates(cache):
    """Test that network failures are not swallowed by the service."""
    registry = FakeRegistryClient(error=httpx.ConnectError("connection refused"))
    service = SearchService.create(cache=cache, registry_client=registry)

    with pytest.raises(httpx.ConnectError):
        run(service.search("tesla", "7"))

    assert len(cache) == 0


def test_expired_entry_refetched(service, registry, clock):
    """Test that an entry past its TTL triggers a new fetch."""
    run(service.search("tesla", "7"))
    clock.advance(301)
    outcome = run(service.search("tesla", "7"))

    assert outcome.from_cache is False
    assert registry.queries == ["tesla", "tesla"]


def test_stats_and_clear(service):
    """Test counters and cache clearing."""
    run(service.search("tesla", "7"))
    run(service.search("tesla", "7"))

    stats = service.get_stats()
    assert stats["cache"]["entries"] == 1
    assert stats["search"]["cache_hits"] == 1
    assert stats["search"]["cache_misses"] == 1
    assert stats["search"]["upstream_fetches"] == 1
    assert stats["search"]["hit_rate"] == 0.5

    assert service.clear_cache() == 1
    assert service.get_stats()["cache"]["entries"] == 0
