"""FIPE upstream client protocol.

One coroutine per FIPE capability. Implementations raise
``fipe_proxy.errors.UpstreamError`` on any transport or upstream failure.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FipeClient(Protocol):
    """Protocol for FIPE API clients."""

    async def fetch_reference_months(self) -> list[dict[str, Any]]:
        """List reference months (``[{"Codigo": 319, "Mes": "..."}]``)."""
        ...

    async def fetch_brands(self, mes: str, tipo: str) -> Any:
        """List brands for a reference month and vehicle type."""
        ...

    async def fetch_models(self, mes: str, tipo: str, marca: str) -> Any:
        """List models of a brand."""
        ...

    async def fetch_model_years(self, mes: str, tipo: str, marca: str, modelo: str) -> Any:
        """List year/fuel combinations of a model."""
        ...

    async def fetch_price_quote(
        self,
        mes: str,
        tipo: str,
        marca: str,
        modelo: str,
        ano: str,
        anomodelo: str,
        combustivel: str,
    ) -> Any:
        """Fetch the final price for a fully specified vehicle."""
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
