"""FIPE Proxy - simplified, cached access to the FIPE vehicle price table.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CacheStore, FipeClient)
    - repositories: In-memory TTL cache and httpx FIPE client
    - services: Lookup logic (FipeService) and path routing (RouteResolver)
    - handlers: HTTP endpoint handlers and the error responder
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)
    - middleware: Security headers and inbound rate limiting

Usage:
    ```python
    from fipe_proxy.repositories import FipeHttpClient, InMemoryCacheRepository
    from fipe_proxy.services import FipeService

    service = FipeService.create(
        cache=InMemoryCacheRepository.create(),
        client=FipeHttpClient.create(),
    )
    ```

For HTTP API:
    ```python
    from fipe_proxy.api.app import app, create_app
    ```
"""

from fipe_proxy.cache_keys import cache_key
from fipe_proxy.config import get_settings, settings
from fipe_proxy.entities import CacheEntryEntity, Resolution, VehicleTypeEntity
from fipe_proxy.errors import FipeProxyError, NotFoundError, RouteNotFoundError, UpstreamError
from fipe_proxy.handlers import FipeHandler
from fipe_proxy.protocols import CacheStore, FipeClient
from fipe_proxy.repositories import FipeHttpClient, InMemoryCacheRepository
from fipe_proxy.services import FipeService, RouteResolver

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "CacheStore",
    "FipeClient",
    # Services (business logic)
    "FipeService",
    "RouteResolver",
    "cache_key",
    # Handlers (HTTP)
    "FipeHandler",
    # Repositories (data access)
    "FipeHttpClient",
    "InMemoryCacheRepository",
    # Entities (domain models)
    "CacheEntryEntity",
    "Resolution",
    "VehicleTypeEntity",
    # Errors
    "FipeProxyError",
    "UpstreamError",
    "NotFoundError",
    "RouteNotFoundError",
]
