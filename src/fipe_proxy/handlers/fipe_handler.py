"""HTTP handlers for FIPE lookups.

Handlers turn resolver results into HTTP responses. They handle HTTP
concerns like status codes and error envelopes; routing and caching live
in the service layer.
"""

from typing import Any

from fastapi.responses import JSONResponse

from fipe_proxy.dto import WelcomeResponse
from fipe_proxy.guide import AUTHOR, EMAIL, INSTAGRAM, VERSION, WHATSAPP, get_manual
from fipe_proxy.handlers.error_responder import render_error
from fipe_proxy.services import RouteResolver


class FipeHandler:
    """HTTP handlers for the simplified FIPE API.

    Example:
        ```python
        handler = FipeHandler(resolver=RouteResolver(service))

        @app.get("/{path:path}")
        async def lookup(request: Request):
            return await handler.lookup(request.method, request.url.path)
        ```
    """

    def __init__(self, resolver: RouteResolver) -> None:
        """Initialize the handler.

        Args:
            resolver: Route resolver for the simplified paths (required).
        """
        self._resolver = resolver

    def root(self) -> dict[str, Any]:
        """Handle GET / with contact details and the manual."""
        welcome = WelcomeResponse(
            message="Bem-vindo à API de Consulta FIPE",
            descricao="Use o prefixo /api para acessar os endpoints da API.",
            autor=AUTHOR,
            versao=VERSION,
            email=EMAIL,
            whatsapp=WHATSAPP,
            instagram=INSTAGRAM,
        )
        return {**welcome.model_dump(), **get_manual()}

    def api_root(self) -> dict[str, Any]:
        """Handle GET /api and /api/ with the manual."""
        welcome = WelcomeResponse(
            message="Bem-vindo à API de Consulta FIPE",
            descricao=(
                "Esta API permite consultar preços de veículos na tabela FIPE "
                "de forma simples e intuitiva."
            ),
            autor=AUTHOR,
            versao=VERSION,
        )
        return {**welcome.model_dump(), **get_manual()}

    async def lookup(self, method: str, path: str) -> JSONResponse:
        """Handle every other request through the route table.

        Args:
            method: HTTP method
            path: Decoded request path

        Returns:
            JSONResponse with the FIPE payload or an error envelope
        """
        result = await self._resolver.resolve(method, path)
        if not result.ok:
            return render_error(result.error)
        return JSONResponse(content=result.payload)
