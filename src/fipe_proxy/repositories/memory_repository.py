"""In-memory implementation of CacheStore.

Entries live in a plain dict for the lifetime of the process and expire
lazily: an entry older than the TTL is dropped the next time it is read.
There is no size bound and no background sweep.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

from fipe_proxy.config import settings
from fipe_proxy.entities import CacheEntryEntity

logger = logging.getLogger(__name__)


class InMemoryCacheRepository:
    """Process-local TTL cache.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Not shared between worker processes. Concurrent misses on the same key
    may both fetch upstream; the last ``set`` wins.
    """

    def __init__(
        self,
        ttl: int | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize the in-memory cache.

        Args:
            ttl: Time-to-live for entries in seconds. Defaults to settings.
            clock: Monotonic time source in seconds. Defaults to time.monotonic.
        """
        self._ttl = ttl or settings.cache_ttl
        self._clock = clock or time.monotonic
        self._entries: dict[str, CacheEntryEntity] = {}

    @classmethod
    def create(cls, ttl: int | None = None) -> "InMemoryCacheRepository":
        """Factory method to create InMemoryCacheRepository with defaults.

        Args:
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured InMemoryCacheRepository
        """
        return cls(ttl=ttl)

    def get(self, key: str) -> Any | None:
        """Return a live cached value or None.

        Args:
            key: The cache key

        Returns:
            The cached value, or None if missing or expired
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.is_expired(self._clock(), self._ttl):
            # pop: a concurrent set may already have replaced or removed it
            self._entries.pop(key, None)
            logger.debug("Cache entry expired: %s", key)
            return None

        return entry.value

    def set(self, key: str, value: Any) -> None:
        """Store a value, overwriting any previous entry.

        Args:
            key: The cache key
            value: JSON-compatible value to store
        """
        self._entries[key] = CacheEntryEntity(key=key, value=value, created_at=self._clock())

    def __len__(self) -> int:
        """Number of physically stored entries (expired ones included)."""
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    @property
    def ttl(self) -> int:
        """Get the entry TTL in seconds."""
        return self._ttl
