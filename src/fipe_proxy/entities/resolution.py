"""Route resolution result entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one request path.

    Exactly one of ``payload`` / ``error`` is meaningful: when ``error`` is
    set the request failed and ``payload`` is ignored.

    Attributes:
        payload: JSON-compatible body for a successful resolution
        error: The exception that ended resolution, if any
        route: Name of the matched path shape (None when nothing matched)
    """

    payload: Any = None
    error: Exception | None = None
    route: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, payload: Any, route: str) -> "Resolution":
        return cls(payload=payload, route=route)

    @classmethod
    def failure(cls, error: Exception, route: str | None = None) -> "Resolution":
        return cls(error=error, route=route)
