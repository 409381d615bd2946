"""Cache storage protocol.

Defines the interface for the key/value store that holds upstream
payloads for a limited time.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for TTL cache backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def get(self, key: str) -> Any | None:
        """Return the stored value, or None if absent or expired.

        Expired entries are removed as a side effect.

        Args:
            key: The cache key

        Returns:
            The cached value or None
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a value under ``key``, replacing any previous entry.

        Args:
            key: The cache key
            value: JSON-compatible value to store
        """
        ...
