"""Repository layer for data access.

This layer abstracts external dependencies (process memory, the FIPE API)
behind protocol-based interfaces. This enables:
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from fipe_proxy.protocols import CacheStore, FipeClient

from .fipe_http_client import FipeHttpClient
from .memory_repository import InMemoryCacheRepository

__all__ = [
    "CacheStore",
    "FipeClient",
    "FipeHttpClient",
    "InMemoryCacheRepository",
]
