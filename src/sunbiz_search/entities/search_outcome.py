"""Search outcome domain entity."""

from dataclasses import dataclass

from .match_record import MatchRecord


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one lookup.

    Attributes:
        results: Records trimmed to the requested limit
        from_cache: True when served without contacting the registry
    """

    results: tuple[MatchRecord, ...]
    from_cache: bool
