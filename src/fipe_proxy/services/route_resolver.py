"""Simplified path routing.

Maps the path-encoded query syntax (``/api/mes=319&tipo=2/marca=80``) onto
FipeService operations through an explicit table of templates. Each
template names the service operation it resolves to and the parameters it
captures, in order. Templates are matched in full; a path matching none of
them resolves to RouteNotFoundError.
"""

import inspect
import logging
import re
from dataclasses import dataclass, field

from fipe_proxy.entities import Resolution
from fipe_proxy.errors import FipeProxyError, RouteNotFoundError
from fipe_proxy.services.fipe_service import FipeService

logger = logging.getLogger(__name__)

_PARAM = re.compile(r"\{(\w+)\}")
# Values are single tokens: never cross a "/" segment or an "&" pair.
_VALUE = r"[^/&]+"


@dataclass(frozen=True)
class RouteShape:
    """One simplified path template.

    Attributes:
        name: Route name, also used in logs
        template: Literal path with ``{param}`` placeholders
        operation: FipeService method the route resolves to
    """

    name: str
    template: str
    operation: str
    params: tuple[str, ...] = field(init=False)
    pattern: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        params = tuple(_PARAM.findall(self.template))
        regex = ""
        for literal, param in zip(_PARAM.split(self.template)[::2], (*params, None)):
            regex += re.escape(literal)
            if param is not None:
                regex += f"(?P<{param}>{_VALUE})"
        # optional trailing slash
        object.__setattr__(self, "params", params)
        object.__setattr__(self, "pattern", re.compile(f"{regex}/?"))

    def match(self, path: str) -> dict[str, str] | None:
        """Return captured parameters if ``path`` matches this shape."""
        found = self.pattern.fullmatch(path)
        if found is None:
            return None
        return {name: found.group(name) for name in self.params}


_VEHICLE = "/api/mes={mes}&tipo={tipo}"
_MODEL = _VEHICLE + "/marca={marca}/modelo={modelo}"

ROUTE_SHAPES: tuple[RouteShape, ...] = (
    RouteShape("months", "/api/mes", "months"),
    RouteShape("month", "/api/mes={mes}", "month"),
    RouteShape("vehicle_types", "/api/mes={mes}&tipo", "vehicle_types"),
    RouteShape("brands", _VEHICLE + "/marca", "brands"),
    RouteShape("brand", _VEHICLE + "/marca={marca}", "brand"),
    RouteShape("models", _VEHICLE + "/marca={marca}/modelo", "models"),
    RouteShape("model_years", _MODEL + "/ano", "model_years"),
    RouteShape(
        "price_quote",
        _MODEL + "/ano={ano}/anomodelo={anomodelo}/combustivel={combustivel}",
        "price_quote",
    ),
)


class RouteResolver:
    """Resolve request paths against ROUTE_SHAPES.

    ``resolve`` never raises: every outcome, including failures, comes
    back as a Resolution for the HTTP boundary to render.

    Example:
        ```python
        resolver = RouteResolver(service)
        result = await resolver.resolve("GET", "/api/mes=319&tipo=2/marca")
        if result.ok:
            return result.payload
        ```
    """

    def __init__(
        self,
        service: FipeService,
        shapes: tuple[RouteShape, ...] = ROUTE_SHAPES,
    ) -> None:
        """Initialize the resolver.

        Args:
            service: The FIPE service that performs lookups (required).
            shapes: Route table, defaults to ROUTE_SHAPES.
        """
        self._service = service
        self._shapes = shapes

    def match(self, method: str, path: str) -> tuple[RouteShape, dict[str, str]] | None:
        """Find the shape matching ``path`` (GET and HEAD only)."""
        if method.upper() not in ("GET", "HEAD"):
            return None
        for shape in self._shapes:
            params = shape.match(path)
            if params is not None:
                return shape, params
        return None

    async def resolve(self, method: str, path: str) -> Resolution:
        """Resolve one request into a payload or an error.

        Args:
            method: HTTP method
            path: Decoded request path

        Returns:
            Resolution carrying the payload, or the error that stopped it
        """
        matched = self.match(method, path)
        if matched is None:
            return Resolution.failure(RouteNotFoundError(method, path))

        shape, params = matched
        operation = getattr(self._service, shape.operation)
        try:
            payload = operation(*(params[name] for name in shape.params))
            if inspect.isawaitable(payload):
                payload = await payload
        except FipeProxyError as e:
            logger.info("%s %s -> %s", shape.name, params, e)
            return Resolution.failure(e, route=shape.name)
        except Exception as e:
            logger.exception("Unexpected error resolving %s %s", method, path)
            return Resolution.failure(e, route=shape.name)

        return Resolution.success(payload, route=shape.name)
