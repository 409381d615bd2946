"""Inbound middleware applied to every request before routing."""

from .rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from .security import SECURITY_HEADERS, SecurityHeadersMiddleware

__all__ = [
    "FixedWindowRateLimiter",
    "RateLimitMiddleware",
    "SECURITY_HEADERS",
    "SecurityHeadersMiddleware",
]
