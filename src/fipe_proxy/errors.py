"""Error taxonomy for the FIPE proxy.

Everything raised below the handler layer derives from ``FipeProxyError``.
The handler layer is the only place that turns these into HTTP responses.
"""


class FipeProxyError(Exception):
    """Base exception for the FIPE proxy."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UpstreamError(FipeProxyError):
    """The FIPE service could not be reached or answered with a failure.

    The underlying exception is kept as ``__cause__`` (raise ... from e);
    ``detail`` is its text, surfaced to callers as ``detalhes``.
    """

    def __init__(self, endpoint: str, cause: BaseException) -> None:
        self.endpoint = endpoint
        self.detail = str(cause) or cause.__class__.__name__
        super().__init__(f"FIPE request to {endpoint} failed: {self.detail}")


class NotFoundError(FipeProxyError):
    """A well-formed lookup matched no entity (e.g. unknown brand code)."""

    def __init__(self, resource: str, code: str) -> None:
        self.resource = resource
        self.code = code
        super().__init__(f"{resource} {code!r} not found")


class RouteNotFoundError(FipeProxyError):
    """No path shape matched the request."""

    def __init__(self, method: str, path: str) -> None:
        self.method = method
        self.path = path
        super().__init__(f"No route for {method} {path}")
