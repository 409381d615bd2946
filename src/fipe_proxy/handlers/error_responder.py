"""Map errors to JSON error responses.

This is the only place that knows which status code each error kind gets.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from fipe_proxy.dto import ErrorResponse
from fipe_proxy.errors import NotFoundError, RouteNotFoundError, UpstreamError
from fipe_proxy.guide import get_manual, route_not_found_guide

_NOT_FOUND_MESSAGES = {
    "reference month": "O mês de referência solicitado não existe. Consulte os exemplos abaixo.",
    "brand": "A marca solicitada não existe. Consulte os exemplos abaixo.",
}


def _with_manual(response: ErrorResponse) -> dict:
    return {**response.model_dump(exclude_none=True), **get_manual()}


def render_error(error: Exception) -> JSONResponse:
    """Build the JSON response for an error.

    Args:
        error: The exception that ended request resolution

    Returns:
        JSONResponse with the error envelope and usage guide
    """
    if isinstance(error, RouteNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=route_not_found_guide(),
        )

    if isinstance(error, NotFoundError):
        body = ErrorResponse(
            error="Dados não encontrados",
            message=_NOT_FOUND_MESSAGES.get(
                error.resource,
                "O recurso solicitado não existe. Consulte os exemplos abaixo.",
            ),
        )
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=_with_manual(body))

    if isinstance(error, UpstreamError):
        body = ErrorResponse(
            error="Erro ao consultar a FIPE",
            message="Não foi possível obter os dados da tabela FIPE. Tente novamente mais tarde.",
            detalhes=error.detail,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_with_manual(body),
        )

    body = ErrorResponse(
        error="Erro interno do servidor",
        message=str(error) or "Ocorreu um erro inesperado",
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_with_manual(body),
    )
