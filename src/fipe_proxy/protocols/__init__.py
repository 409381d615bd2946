"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the in-memory cache for another backend
- Unit testing the resolver with a fake FIPE client
- Clear separation of concerns

Usage:
    ```python
    from fipe_proxy.protocols import CacheStore, FipeClient

    cache: CacheStore = InMemoryCacheRepository()
    client: FipeClient = FipeHttpClient.create()
    ```
"""

from .cache_store import CacheStore
from .fipe_client import FipeClient

__all__ = [
    "CacheStore",
    "FipeClient",
]
