"""FIPE service for core business logic.

This service orchestrates lookups by coordinating the cache store
and the FIPE client: cache-or-fetch for list resources, local filtering
for single-item lookups FIPE has no endpoint for, and pass-through for
everything else.
"""

import dataclasses
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fipe_proxy.cache_keys import BRANDS, MODELS, REFERENCE_MONTHS, cache_key
from fipe_proxy.entities import VEHICLE_TYPES
from fipe_proxy.errors import NotFoundError
from fipe_proxy.protocols import CacheStore, FipeClient

logger = logging.getLogger(__name__)


def _is_fipe_error(data: Any) -> bool:
    """FIPE rejects bad parameters with HTTP 200 and ``{"codigo": ..., "erro": ...}``."""
    return isinstance(data, dict) and "erro" in data


def _listing(data: Any) -> list[Any]:
    """Items of a list payload; anything else (error objects included) is empty."""
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, dict)]


class FipeService:
    """Core lookup service.

    This service depends on PROTOCOLS, not concrete implementations:
    - CacheStore: in-memory by default
    - FipeClient: httpx client by default, fakes in tests

    Caching policy:
    - reference months, brands and models are cached
    - single month / single brand lookups always refetch the list
    - model years and price quotes are never cached
    - FIPE error objects (``{"erro": ...}``) are passed through, never cached

    Example:
        ```python
        service = FipeService.create(
            cache=InMemoryCacheRepository.create(),
            client=FipeHttpClient.create(),
        )
        brands = await service.brands("319", "2")
        ```
    """

    def __init__(self, cache: CacheStore, client: FipeClient) -> None:
        """Initialize the FIPE service.

        Args:
            cache: Cache storage backend (required).
            client: FIPE API client (required).
        """
        self._cache = cache
        self._client = client

    @classmethod
    def create(cls, cache: CacheStore, client: FipeClient) -> "FipeService":
        """Factory method to create FipeService.

        Args:
            cache: Cache storage backend (required).
            client: FIPE API client (required).

        Returns:
            Configured FipeService instance
        """
        return cls(cache=cache, client=client)

    async def _cached(
        self,
        resource: str,
        params: dict[str, str],
        fetch: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the cached payload for (resource, params) or fetch and store it.

        No in-flight deduplication: concurrent misses each call ``fetch``.
        """
        key = cache_key(resource, params)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return cached

        logger.debug("Cache miss: %s", key)
        data = await fetch()
        if _is_fipe_error(data):
            logger.info("FIPE rejected %s: %s", key, data.get("erro"))
            return data
        self._cache.set(key, data)
        return data

    async def months(self) -> Any:
        """List all reference months (cached)."""
        return await self._cached(REFERENCE_MONTHS, {}, self._client.fetch_reference_months)

    async def month(self, mes: str) -> dict[str, Any]:
        """Find one reference month by code.

        Always refetches the full list; the cached listing is not consulted.

        Raises:
            NotFoundError: If no month has ``Codigo == mes``
        """
        data = await self._client.fetch_reference_months()
        for item in _listing(data):
            if str(item.get("Codigo")) == mes:
                return item
        raise NotFoundError("reference month", mes)

    def vehicle_types(self, mes: str | None = None) -> list[dict[str, Any]]:
        """Static vehicle type list. ``mes`` is accepted but not used."""
        return [dataclasses.asdict(vehicle_type) for vehicle_type in VEHICLE_TYPES]

    async def brands(self, mes: str, tipo: str) -> Any:
        """List brands for a month and vehicle type (cached)."""
        return await self._cached(
            BRANDS,
            {"mes": mes, "tipo": tipo},
            lambda: self._client.fetch_brands(mes, tipo),
        )

    async def brand(self, mes: str, tipo: str, marca: str) -> dict[str, Any]:
        """Find one brand by its code (``Value``).

        Raises:
            NotFoundError: If the brand list has no matching entry
        """
        data = await self._client.fetch_brands(mes, tipo)
        for item in _listing(data):
            if str(item.get("Value")) == marca:
                return item
        raise NotFoundError("brand", marca)

    async def models(self, mes: str, tipo: str, marca: str) -> Any:
        """List models of a brand (cached)."""
        return await self._cached(
            MODELS,
            {"mes": mes, "tipo": tipo, "marca": marca},
            lambda: self._client.fetch_models(mes, tipo, marca),
        )

    async def model_years(self, mes: str, tipo: str, marca: str, modelo: str) -> Any:
        """List year/fuel variants of a model (never cached)."""
        return await self._client.fetch_model_years(mes, tipo, marca, modelo)

    async def price_quote(
        self,
        mes: str,
        tipo: str,
        marca: str,
        modelo: str,
        ano: str,
        anomodelo: str,
        combustivel: str,
    ) -> Any:
        """Fetch the final price (never cached, ``ano`` passed through)."""
        return await self._client.fetch_price_quote(
            mes, tipo, marca, modelo, ano, anomodelo, combustivel
        )
