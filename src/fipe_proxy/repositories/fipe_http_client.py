"""httpx-based FIPE API client.

Talks to the public FIPE service (``https://veiculos.fipe.org.br/api/veiculos``)
which only accepts form-encoded POST requests, one endpoint per level of the
month/type/brand/model/year hierarchy.

Failures of any kind (connection errors, timeouts, non-2xx answers, bodies
that are not JSON) are raised as UpstreamError. Nothing is retried.
"""

import logging
from typing import Any

import httpx

from fipe_proxy.config import settings
from fipe_proxy.errors import UpstreamError

logger = logging.getLogger(__name__)

# FIPE valuation mode; the proxy only exposes the traditional table.
TIPO_CONSULTA = "tradicional"


class FipeHttpClient:
    """httpx implementation of the FipeClient protocol.

    This class satisfies the FipeClient protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = FipeHttpClient.create()
        months = await client.fetch_reference_months()
        brands = await client.fetch_brands(mes="319", tipo="2")
        await client.close()
        ```
    """

    REFERENCE_TABLE = "ConsultarTabelaDeReferencia"
    BRANDS = "ConsultarMarcas"
    MODELS = "ConsultarModelos"
    MODEL_YEARS = "ConsultarAnoModelo"
    PRICE = "ConsultarValorComTodosParametros"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the FIPE client.

        Args:
            base_url: FIPE API base URL. Defaults to settings.fipe_api_url.
            timeout: Request timeout in seconds. Defaults to settings.fipe_timeout.
            transport: Optional httpx transport (used by tests to stub FIPE).
        """
        self._base_url = (base_url or settings.fipe_api_url).rstrip("/")
        self._timeout = timeout or settings.fipe_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "FipeHttpClient":
        """Factory method to create FipeHttpClient with defaults.

        Args:
            base_url: FIPE API URL. If None, uses settings.
            timeout: Timeout in seconds. If None, uses settings.

        Returns:
            Configured FipeHttpClient
        """
        return cls(base_url=base_url, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
                transport=self._transport,
            )
        return self._client

    @property
    def base_url(self) -> str:
        """Get the FIPE API base URL."""
        return self._base_url

    async def _post(self, endpoint: str, form: dict[str, str] | None = None) -> Any:
        """POST a form to a FIPE endpoint and decode the JSON answer.

        Args:
            endpoint: Endpoint name, e.g. "ConsultarMarcas"
            form: Form fields; sent as application/x-www-form-urlencoded

        Returns:
            The decoded JSON body

        Raises:
            UpstreamError: On transport failure, non-2xx status or invalid JSON
        """
        url = f"{self._base_url}/{endpoint}"
        logger.debug("POST %s %s", url, form or {})

        try:
            response = await self.client.post(url, data=form or {})
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.warning("FIPE %s failed: %s", endpoint, e)
            raise UpstreamError(endpoint, e) from e
        except ValueError as e:
            logger.warning("FIPE %s returned a non-JSON body: %s", endpoint, e)
            raise UpstreamError(endpoint, e) from e

    async def fetch_reference_months(self) -> list[dict[str, Any]]:
        """List all reference months, most recent first."""
        return await self._post(self.REFERENCE_TABLE)

    async def fetch_brands(self, mes: str, tipo: str) -> Any:
        """List brands for a reference month and vehicle type.

        Args:
            mes: Reference month code
            tipo: Vehicle type code (1 car, 2 motorcycle, 3 truck)
        """
        return await self._post(
            self.BRANDS,
            {
                "codigoTabelaReferencia": mes,
                "codigoTipoVeiculo": tipo,
            },
        )

    async def fetch_models(self, mes: str, tipo: str, marca: str) -> Any:
        """List models of a brand."""
        return await self._post(
            self.MODELS,
            {
                "codigoTabelaReferencia": mes,
                "codigoTipoVeiculo": tipo,
                "codigoMarca": marca,
            },
        )

    async def fetch_model_years(self, mes: str, tipo: str, marca: str, modelo: str) -> Any:
        """List the year/fuel variants of a model (e.g. ``"2020-1"``)."""
        return await self._post(
            self.MODEL_YEARS,
            {
                "codigoTabelaReferencia": mes,
                "codigoTipoVeiculo": tipo,
                "codigoMarca": marca,
                "codigoModelo": modelo,
            },
        )

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
        """Fetch the price of a fully specified vehicle.

        ``ano`` is forwarded exactly as received, including composite
        values such as ``"2020-1"``.
        """
        return await self._post(
            self.PRICE,
            {
                "codigoTabelaReferencia": mes,
                "codigoTipoVeiculo": tipo,
                "codigoMarca": marca,
                "codigoModelo": modelo,
                "ano": ano,
                "anoModelo": anomodelo,
                "codigoTipoCombustivel": combustivel,
                "tipoConsulta": TIPO_CONSULTA,
            },
        )

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
