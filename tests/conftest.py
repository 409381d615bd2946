"""Shared fixtures: a fake FIPE client and a controllable clock."""

import copy
from typing import Any

import pytest

from fipe_proxy.repositories import InMemoryCacheRepository
from fipe_proxy.services import FipeService, RouteResolver

MONTHS = [
    {"Codigo": 319, "Mes": "maio/2025 "},
    {"Codigo": 318, "Mes": "abril/2025 "},
]
BRANDS = [
    {"Label": "Fiat", "Value": "80"},
    {"Label": "Honda", "Value": "77"},
]
MODELS = {
    "Modelos": [{"Label": "CG 160 FAN", "Value": 8071}],
    "Anos": [{"Label": "2020 Gasolina", "Value": "2020-1"}],
}
YEARS = [{"Label": "2020 Gasolina", "Value": "2020-1"}]
QUOTE = {
    "Valor": "R$ 12.345,00",
    "Marca": "Honda",
    "Modelo": "CG 160 FAN",
    "AnoModelo": 2020,
    "Combustivel": "Gasolina",
    "CodigoFipe": "811001-0",
    "MesReferencia": "maio de 2025 ",
    "SiglaCombustivel": "G",
}


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFipeClient:
    """In-memory stand-in for FipeHttpClient that records every call."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {
            "months": MONTHS,
            "brands": BRANDS,
            "models": MODELS,
            "years": YEARS,
            "quote": QUOTE,
        }
        self.error: Exception | None = None
        self.calls: list[tuple] = []
        self.closed = False

    def _answer(self, name: str, *args: str) -> Any:
        self.calls.append((name, *args))
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.data[name])

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)

    async def fetch_reference_months(self):
        return self._answer("months")

    async def fetch_brands(self, mes, tipo):
        return self._answer("brands", mes, tipo)

    async def fetch_models(self, mes, tipo, marca):
        return self._answer("models", mes, tipo, marca)

    async def fetch_model_years(self, mes, tipo, marca, modelo):
        return self._answer("years", mes, tipo, marca, modelo)

    async def fetch_price_quote(self, mes, tipo, marca, modelo, ano, anomodelo, combustivel):
        return self._answer("quote", mes, tipo, marca, modelo, ano, anomodelo, combustivel)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def clock():
    """A clock that only moves when told to."""
    return FakeClock()


@pytest.fixture
def cache(clock):
    """Fresh one-hour cache driven by the fake clock."""
    return InMemoryCacheRepository(ttl=3600, clock=clock)


@pytest.fixture
def fake_client():
    """Fake FIPE client with canned answers."""
    return FakeFipeClient()


@pytest.fixture
def service(cache, fake_client):
    """FipeService wired to the fake client and fresh cache."""
    return FipeService.create(cache=cache, client=fake_client)


@pytest.fixture
def resolver(service):
    """RouteResolver over the test service."""
    return RouteResolver(service)
