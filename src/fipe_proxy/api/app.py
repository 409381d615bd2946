from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.middleware.gzip import GZipMiddleware

from fipe_proxy.api.dependencies import HandlerDep, lifespan
from fipe_proxy.config import Settings, configure_logging, settings
from fipe_proxy.guide import VERSION
from fipe_proxy.middleware import (
    FixedWindowRateLimiter,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)
from fipe_proxy.protocols import CacheStore, FipeClient

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
CORS_METHODS = "GET,HEAD,PUT,PATCH,POST,DELETE"


def create_app(
    app_settings: Settings | None = None,
    cache: CacheStore | None = None,
    fipe_client: FipeClient | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        app_settings: Settings to use. Defaults to the global settings.
        cache: Cache store to use instead of a fresh in-memory one.
        fipe_client: FIPE client to use instead of the httpx client.

    Returns:
        Configured FastAPI app; services are created in its lifespan.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings.log_level)

    # Interactive docs are disabled: every unknown path answers with the usage guide.
    app = FastAPI(
        title="FIPE Proxy API",
        description="Simplified, cached access to the FIPE vehicle price table",
        version=VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = app_settings
    if cache is not None:
        app.state.cache = cache
    if fipe_client is not None:
        app.state.fipe_client = fipe_client

    # Last added runs first: CORS -> gzip -> security headers -> rate limit -> routes
    app.add_middleware(
        RateLimitMiddleware,  # type: ignore[arg-type]
        limiter=FixedWindowRateLimiter(
            max_requests=app_settings.rate_limit_max_requests,
            window_seconds=app_settings.rate_limit_window_seconds,
        ),
    )
    app.add_middleware(SecurityHeadersMiddleware)  # type: ignore[arg-type]
    app.add_middleware(GZipMiddleware, minimum_size=1000)  # type: ignore[arg-type]
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root(handler: HandlerDep) -> dict[str, Any]:
        """Root endpoint with contact details and the usage manual."""
        return handler.root()

    @app.get("/api")
    @app.get("/api/")
    async def api_root(handler: HandlerDep) -> dict[str, Any]:
        """API entry point with the usage manual."""
        return handler.api_root()

    @app.options("/{path:path}")
    async def options() -> Response:
        """Any OPTIONS request, preflight or not, is answered with 204."""
        return Response(
            status_code=status.HTTP_204_NO_CONTENT,
            headers={"Access-Control-Allow-Methods": CORS_METHODS},
        )

    @app.api_route("/{path:path}", methods=ALL_METHODS)
    async def lookup(request: Request, handler: HandlerDep) -> JSONResponse:
        """Simplified FIPE lookups; unknown paths get the 404 guide."""
        return await handler.lookup(request.method, request.url.path)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fipe_proxy.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
