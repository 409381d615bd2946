"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract for the
envelopes this service builds itself. FIPE payloads are passed through
unchanged and have no DTO.
"""

from .responses import ErrorResponse, WelcomeResponse

__all__ = [
    "ErrorResponse",
    "WelcomeResponse",
]
