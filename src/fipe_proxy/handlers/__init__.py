"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .error_responder import render_error
from .fipe_handler import FipeHandler

__all__ = [
    "FipeHandler",
    "render_error",
]
