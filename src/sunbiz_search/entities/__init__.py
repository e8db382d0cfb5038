"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cache_entry import CacheEntry
from .match_record import MatchRecord
from .registry_page import RegistryPage
from .search_outcome import SearchOutcome

__all__ = ["CacheEntry", "MatchRecord", "RegistryPage", "SearchOutcome"]
