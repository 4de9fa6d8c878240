"""
Exact-match path routing.

A RouteTable is an ordered mapping from path to Route, plus the Route used
when nothing matches. Dispatch is a single dictionary lookup.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from pydantic import BaseModel

from service.handlers.utils.observability import logger, tracer
from service.models.request import HttpRequest

BodyBuilder = Callable[[HttpRequest], BaseModel]


@dataclass(frozen=True)
class Route:
    """Status code and body builder for one path."""

    status_code: int
    build_body: BodyBuilder


@dataclass(frozen=True)
class RouteResult:
    """Outcome of dispatching a request against a RouteTable."""

    status_code: int
    body: BaseModel
    matched: bool


class RouteTable:
    """Ordered path table with a fallback route."""

    def __init__(self, routes: Iterable[Tuple[str, Route]], fallback: Route):
        self._routes = dict(routes)
        self._fallback = fallback

    @property
    def paths(self) -> List[str]:
        """Known paths in declaration order."""
        return list(self._routes)

    @tracer.capture_method
    def dispatch(self, request: HttpRequest) -> RouteResult:
        """Resolve the request path and build the response body."""
        route = self._routes.get(request.path)
        matched = route is not None
        if route is None:
            route = self._fallback

        logger.debug("Route resolved", extra={"path": request.path, "matched": matched})
        return RouteResult(
            status_code=route.status_code,
            body=route.build_body(request),
            matched=matched,
        )
