#!/usr/bin/env python3
"""
Demo script for the FIPE proxy.

Walks the month -> brand -> model -> year -> price hierarchy against the
live FIPE service through FipeService, showing where the cache is used.
"""

import asyncio
import time

from fipe_proxy.repositories import FipeHttpClient, InMemoryCacheRepository
from fipe_proxy.services import FipeService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def timed(label: str, coro):
    """Await ``coro`` and print how long it took."""
    start = time.time()
    result = await coro
    print(f"  {label}: {(time.time() - start) * 1000:.1f}ms")
    return result


async def demo_hierarchy(service: FipeService, tipo: str = "2") -> None:
    """Resolve one full price quote, step by step."""
    print_section("Full lookup (motorcycles)")

    months = await timed("months (miss)", service.months())
    await timed("months (hit)", service.months())
    mes = str(months[0]["Codigo"])
    print(f"  Latest reference month: {months[0]['Mes'].strip()} ({mes})")

    brands = await timed("brands (miss)", service.brands(mes, tipo))
    await timed("brands (hit)", service.brands(mes, tipo))
    marca = brands[0]["Value"]
    print(f"  First brand: {brands[0]['Label']} ({marca})")

    models = await timed("models (miss)", service.models(mes, tipo, marca))
    modelo = str(models["Modelos"][0]["Value"])
    print(f"  First model: {models['Modelos'][0]['Label']} ({modelo})")

    years = await timed("years (never cached)", service.model_years(mes, tipo, marca, modelo))
    ano = years[0]["Value"]
    anomodelo, combustivel = ano.split("-")
    print(f"  First year: {years[0]['Label']} ({ano})")

    quote = await timed(
        "price (never cached)",
        service.price_quote(mes, tipo, marca, modelo, ano, anomodelo, combustivel),
    )
    print(f"  Price: {quote.get('Valor')}")


async def main() -> None:
    """Run the demo."""
    print("\n🚗 FIPE Proxy Demo")
    print("=" * 70)

    client = FipeHttpClient.create()
    service = FipeService.create(cache=InMemoryCacheRepository.create(), client=client)

    try:
        await demo_hierarchy(service)

        print("\n" + "=" * 70)
        print("✅ Demo completed successfully!")
        print("=" * 70)

    except Exception as e:
        print(f"\n❌ Error: {e}")
        print("\nMake sure https://veiculos.fipe.org.br is reachable,")
        print("or set FIPE_API_URL to another endpoint.")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
