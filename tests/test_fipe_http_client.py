"""
Tests for the httpx FIPE client, with FIPE stubbed by httpx.MockTransport.
"""

from urllib.parse import parse_qs

import httpx
import pytest

from fipe_proxy.errors import UpstreamError
from fipe_proxy.protocols import FipeClient
from fipe_proxy.repositories import FipeHttpClient

BASE_URL = "https://fipe.test/api/veiculos"


def make_client(handler) -> FipeHttpClient:
    return FipeHttpClient(base_url=BASE_URL, timeout=5, transport=httpx.MockTransport(handler))


def form_of(request: httpx.Request) -> dict[str, str]:
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


class Recorder:
    """MockTransport handler that remembers requests and answers with JSON."""

    def __init__(self, payload=None) -> None:
        self.payload = payload if payload is not None else []
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json=self.payload)


def test_satisfies_protocol():
    """FipeHttpClient is a FipeClient."""
    assert isinstance(FipeHttpClient(base_url=BASE_URL), FipeClient)


@pytest.mark.asyncio
async def test_reference_months_post():
    """Reference table is a POST with no form fields."""
    recorder = Recorder([{"Codigo": 319, "Mes": "maio/2025 "}])
    client = make_client(recorder)

    assert await client.fetch_reference_months() == [{"Codigo": 319, "Mes": "maio/2025 "}]

    request = recorder.requests[0]
    assert request.method == "POST"
    assert str(request.url) == f"{BASE_URL}/ConsultarTabelaDeReferencia"
    await client.close()


@pytest.mark.asyncio
async def test_brands_form_encoded():
    """Brand lookup sends month and type as form fields."""
    recorder = Recorder([{"Label": "Fiat", "Value": "80"}])
    client = make_client(recorder)

    await client.fetch_brands("319", "2")

    request = recorder.requests[0]
    assert request.url.path.endswith("/ConsultarMarcas")
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    assert form_of(request) == {"codigoTabelaReferencia": "319", "codigoTipoVeiculo": "2"}
    await client.close()


@pytest.mark.asyncio
async def test_models_and_years_fields():
    """Model and year lookups add brand and model codes."""
    recorder = Recorder({"Modelos": [], "Anos": []})
    client = make_client(recorder)

    await client.fetch_models("319", "2", "80")
    await client.fetch_model_years("319", "2", "80", "8071")

    models_request, years_request = recorder.requests
    assert models_request.url.path.endswith("/ConsultarModelos")
    assert form_of(models_request)["codigoMarca"] == "80"
    assert years_request.url.path.endswith("/ConsultarAnoModelo")
    assert form_of(years_request)["codigoModelo"] == "8071"
    await client.close()


@pytest.mark.asyncio
async def test_price_quote_fields():
    """Price lookup forwards every parameter and the traditional mode flag."""
    recorder = Recorder({"Valor": "R$ 12.345,00"})
    client = make_client(recorder)

    assert await client.fetch_price_quote("319", "2", "80", "8071", "2020-1", "2020", "1") == {
        "Valor": "R$ 12.345,00"
    }

    request = recorder.requests[0]
    assert request.url.path.endswith("/ConsultarValorComTodosParametros")
    assert form_of(request) == {
        "codigoTabelaReferencia": "319",
        "codigoTipoVeiculo": "2",
        "codigoMarca": "80",
        "codigoModelo": "8071",
        "ano": "2020-1",
        "anoModelo": "2020",
        "codigoTipoCombustivel": "1",
        "tipoConsulta": "tradicional",
    }
    await client.close()


@pytest.mark.asyncio
async def test_non_2xx_raises_upstream_error():
    """Server errors surface as UpstreamError with the status in the detail."""
    client = make_client(lambda request: httpx.Response(500, text="oops"))

    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_brands("319", "2")

    assert exc_info.value.endpoint == "ConsultarMarcas"
    assert "500" in exc_info.value.detail
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
    await client.close()


@pytest.mark.asyncio
async def test_timeout_raises_upstream_error():
    """Timeouts surface as UpstreamError carrying the cause text."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)

    with pytest.raises(UpstreamError) as exc_info:
        await client.fetch_reference_months()

    assert exc_info.value.detail == "timed out"
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
    await client.close()


@pytest.mark.asyncio
async def test_invalid_json_raises_upstream_error():
    """A body that is not JSON is an upstream failure."""
    client = make_client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

    with pytest.raises(UpstreamError):
        await client.fetch_reference_months()
    await client.close()


@pytest.mark.asyncio
async def test_close_is_idempotent():
    """Closing twice is harmless and a new client is created on demand."""
    client = make_client(Recorder())
    await client.fetch_reference_months()
    await client.close()
    await client.close()
    assert await client.fetch_reference_months() == []
    await client.close()


def test_base_url_trailing_slash_stripped():
    """Endpoint URLs never contain a double slash."""
    assert FipeHttpClient(base_url=BASE_URL + "/").base_url == BASE_URL
