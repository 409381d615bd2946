"""Inbound rate limiting.

Fixed-window counter per client IP, kept in process memory. When a client
exceeds the budget for the current window it receives HTTP 429 until the
window rolls over.
"""

import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from fipe_proxy.config import settings

logger = logging.getLogger(__name__)


@dataclass
class RateLimitResult:
    """Outcome of a single rate limit check."""

    allowed: bool
    limit: int
    remaining: int
    reset_after: float


class FixedWindowRateLimiter:
    """Count requests per client in fixed windows.

    Windows start at the client's first request. Expired windows are
    dropped for every client at most once per window length, so idle
    clients do not accumulate.
    """

    def __init__(
        self,
        max_requests: int | None = None,
        window_seconds: int | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize the limiter.

        Args:
            max_requests: Requests allowed per window. Defaults to settings.
            window_seconds: Window length in seconds. Defaults to settings.
            clock: Monotonic time source. Defaults to time.monotonic.
        """
        self._max_requests = max_requests or settings.rate_limit_max_requests
        self._window = window_seconds or settings.rate_limit_window_seconds
        self._clock = clock or time.monotonic
        self._windows: dict[str, tuple[float, int]] = {}
        self._last_sweep = self._clock()

    def hit(self, client_id: str) -> RateLimitResult:
        """Record one request for ``client_id`` and decide whether it may pass."""
        now = self._clock()
        if now - self._last_sweep >= self._window:
            self._sweep(now)

        started, count = self._windows.get(client_id, (now, 0))
        if now - started >= self._window:
            started, count = now, 0

        count += 1
        self._windows[client_id] = (started, count)

        return RateLimitResult(
            allowed=count <= self._max_requests,
            limit=self._max_requests,
            remaining=max(self._max_requests - count, 0),
            reset_after=max(started + self._window - now, 0.0),
        )

    def _sweep(self, now: float) -> None:
        self._windows = {
            client_id: (started, count)
            for client_id, (started, count) in self._windows.items()
            if now - started < self._window
        }
        self._last_sweep = now

    def __len__(self) -> int:
        return len(self._windows)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject clients that exceed their request budget with HTTP 429."""

    def __init__(self, app, limiter: FixedWindowRateLimiter | None = None) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: ASGI application
            limiter: Limiter instance. Defaults to one built from settings.
        """
        super().__init__(app)
        self.limiter = limiter or FixedWindowRateLimiter()

    @staticmethod
    def _client_id(request: Request) -> str:
        return request.client.host if request.client else "unknown"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_id = self._client_id(request)
        result = self.limiter.hit(client_id)
        headers = {
            "X-RateLimit-Limit": str(result.limit),
            "X-RateLimit-Remaining": str(result.remaining),
        }

        if not result.allowed:
            logger.warning("Rate limit exceeded for %s on %s", client_id, request.url.path)
            headers["Retry-After"] = str(math.ceil(result.reset_after))
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "error": "Muitas requisições",
                    "message": "Limite de requisições excedido. Tente novamente mais tarde.",
                },
                headers=headers,
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response
