"""Cache entry domain entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntryEntity:
    """Domain entity for a cached upstream payload.

    Attributes:
        key: The derived cache key
        value: The JSON-compatible payload returned by FIPE
        created_at: Clock reading when the entry was stored (seconds)
    """

    key: str
    value: Any
    created_at: float

    def is_expired(self, now: float, ttl: float) -> bool:
        """Whether the entry is older than ``ttl`` seconds at ``now``."""
        return now - self.created_at > ttl
