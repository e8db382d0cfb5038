from dataclasses import dataclass


@dataclass
class SearchMetrics:
    """Track hit/miss counters for lookups."""

    total_queries: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    upstream_fetches: int = 0
    upstream_failures: int = 0
    total_fetch_time_ms: float = 0.0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        if self.total_queries == 0:
            return 0.0
        return self.cache_hits / self.total_queries

    @property
    def avg_fetch_time_ms(self) -> float:
        """Calculate average registry round-trip time."""
        if self.upstream_fetches == 0:
            return 0.0
        return self.total_fetch_time_ms / self.upstream_fetches

    def record_hit(self) -> None:
        """Record a cache hit."""
        self.total_queries += 1
        self.cache_hits += 1

    def record_miss(self) -> None:
        """Record a cache miss."""
        self.total_queries += 1
        self.cache_misses += 1

    def record_fetch(self, duration_ms: float, success: bool) -> None:
        """Record one registry round trip."""
        self.upstream_fetches += 1
        self.total_fetch_time_ms += duration_ms
        if not success:
            self.upstream_failures += 1

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "total_queries": self.total_queries,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "hit_rate": self.hit_rate,
            "upstream_fetches": self.upstream_fetches,
            "upstream_failures": self.upstream_failures,
            "avg_fetch_time_ms": self.avg_fetch_time_ms,
        }
