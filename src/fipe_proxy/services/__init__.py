"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> RouteResolver -> FipeService -> Repository
    (HTTP)  -> (Routing)     -> (Business)  -> (Cache / FIPE)

Usage:
    ```python
    from fipe_proxy.services import FipeService, RouteResolver

    service = FipeService.create(cache=cache, client=client)
    resolver = RouteResolver(service)
    result = await resolver.resolve("GET", "/api/mes")
    ```
"""

from .fipe_service import FipeService
from .route_resolver import ROUTE_SHAPES, RouteResolver, RouteShape

__all__ = [
    "FipeService",
    "RouteResolver",
    "RouteShape",
    "ROUTE_SHAPES",
]
