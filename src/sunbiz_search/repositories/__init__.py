"""Repository layer for data access.

This layer abstracts external dependencies (the registry website, the
result store) behind protocol-based interfaces. This enables:
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from sunbiz_search.protocols import RegistryClient, ResultCache

from .memory_cache import TTLResultCache
from .sunbiz_client import SunbizClient

__all__ = [
    "RegistryClient",
    "ResultCache",
    "SunbizClient",
    "TTLResultCache",
]
