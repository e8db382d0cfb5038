"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the in-memory cache for another store
- Unit testing with fake registry clients
- Clear separation of concerns

Usage:
    ```python
    from sunbiz_search.protocols import RegistryClient, ResultCache

    cache: ResultCache = TTLResultCache()
    client: RegistryClient = SunbizClient.create()
    ```
"""

from .registry_client import RegistryClient
from .result_cache import ResultCache

__all__ = [
    "RegistryClient",
    "ResultCache",
]
