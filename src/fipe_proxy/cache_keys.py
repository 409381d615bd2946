"""Cache key derivation."""

import json
from collections.abc import Mapping

# Only these upstream resources are ever cached. Year lists and price
# quotes always go to FIPE.
REFERENCE_MONTHS = "referencias"
BRANDS = "marcas"
MODELS = "modelos"

CACHEABLE_RESOURCES = frozenset({REFERENCE_MONTHS, BRANDS, MODELS})


def cache_key(resource: str, params: Mapping[str, str]) -> str:
    """Build a deterministic cache key for a resource and its parameters.

    Parameters are serialized with sorted keys, so two mappings with the
    same items always produce the same key regardless of insertion order.

    Example:
        >>> cache_key("marcas", {"tipo": "2", "mes": "319"})
        'marcas_{"mes":"319","tipo":"2"}'
    """
    if resource not in CACHEABLE_RESOURCES:
        raise ValueError(f"Resource {resource!r} is not cacheable")
    return f"{resource}_{json.dumps(dict(params), sort_keys=True, separators=(',', ':'))}"
