"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class WelcomeResponse(BaseModel):
    """Response DTO for the welcome endpoints.

    The usage manual (contato, exemplos, guiaDeUso) is merged in as
    extra top-level keys.
    """

    message: str = Field(..., description="Greeting")
    descricao: str = Field(..., description="What the API does")
    autor: str = Field(..., description="Maintainer handle")
    versao: str = Field(..., description="API version")

    model_config = {"extra": "allow"}


class ErrorResponse(BaseModel):
    """Response DTO for every error path.

    Usage guide keys are merged in as extras so callers can self-correct.
    """

    error: str = Field(..., description="Short error title")
    message: str = Field(..., description="Human-readable explanation")
    detalhes: str | None = Field(
        None,
        description="Underlying upstream failure, only set for FIPE errors",
    )

    model_config = {"extra": "allow"}
