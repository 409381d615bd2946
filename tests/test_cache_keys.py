"""
Tests for cache key derivation.
"""

import pytest

from fipe_proxy.cache_keys import cache_key


def test_same_params_same_key():
    """Key does not depend on mapping construction order."""
    first = cache_key("marcas", {"mes": "319", "tipo": "2"})
    second = cache_key("marcas", {"tipo": "2", "mes": "319"})
    assert first == second
    assert first == cache_key("marcas", {"mes": "319", "tipo": "2"})


def test_key_format():
    """Key is the resource name followed by compact sorted JSON."""
    assert cache_key("marcas", {"tipo": "2", "mes": "319"}) == 'marcas_{"mes":"319","tipo":"2"}'
    assert cache_key("referencias", {}) == "referencias_{}"


def test_keys_differ_by_resource_and_params():
    """Different resources or values never collide."""
    params = {"mes": "319", "tipo": "2", "marca": "80"}
    assert cache_key("modelos", params) != cache_key("marcas", params)
    assert cache_key("marcas", {"mes": "319", "tipo": "2"}) != cache_key(
        "marcas", {"mes": "319", "tipo": "3"}
    )


@pytest.mark.parametrize("resource", ["anos", "valor", ""])
def test_uncacheable_resource_rejected(resource):
    """Only months, brands and models have cache keys."""
    with pytest.raises(ValueError):
        cache_key(resource, {})
