"""Router - Route table, dispatch and URL generation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from signpost_core.errors import (
    InvalidRouteConstraintError,
    NamedRouteNotFoundError,
    RouteParamFailedConstraintError,
    RouteTargetNotCallableError,
    TooLateToAddNewRouteError,
)
from signpost_core.http.request import Request, Response
from signpost_core.routing.base import Routable
from signpost_core.routing.compiler import ParamPatternCompiler
from signpost_core.routing.group import RouteGroup
from signpost_core.routing.matcher import PatternEngine, PatternEngineError
from signpost_core.routing.params import RouteParams
from signpost_core.routing.route import ControllerRegistry, Route
from signpost_core.utils.config import RouterConfig
from signpost_core.utils.helpers import add_leading_slash, add_trailing_slash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteMatch:
    """Result of a successful lookup."""

    route: Route
    params: RouteParams


class CompiledRouter:
    """Immutable, matcher-ready snapshot of a route table.

    Every route is registered with the engine twice: the canonical form with
    a trailing slash (carrying the route name) and the bare form, so both
    spellings of a path resolve to the same route.
    """

    __slots__ = ("base_path", "routes", "_engine")

    def __init__(self, base_path: str, routes: Tuple[Route, ...], engine: PatternEngine):
        self.base_path = base_path
        self.routes = routes
        self._engine = engine

    @classmethod
    def build(
        cls,
        routes: Sequence[Route],
        base_path: str = "/",
        compiler: Optional[ParamPatternCompiler] = None,
    ) -> "CompiledRouter":
        compiler = compiler or ParamPatternCompiler()
        engine = PatternEngine(base_path)

        for route in routes:
            compiled = compiler.compile(route.uri, route.param_constraints)
            engine.add_match_types(compiled.match_types)
            try:
                engine.map(route.methods, compiled.canonical, route, route.route_name)
                engine.map(route.methods, compiled.bare, route)
            except PatternEngineError as exc:
                raise InvalidRouteConstraintError(route.uri, str(exc)) from exc

        names = Counter(route.route_name for route in routes if route.route_name)
        for name, count in names.items():
            if count > 1:
                logger.warning(
                    f"Route name {name!r} is used by {count} routes; the last one registered wins"
                )

        logger.debug(f"Compiled {len(routes)} routes under base path {base_path!r}")
        return cls(base_path, tuple(routes), engine)

    def find(self, method: str, path: str) -> Optional[RouteMatch]:
        """Find the first route matching method and path."""
        match = self._engine.match(path, method)
        if match is None:
            return None
        return RouteMatch(match.target, RouteParams(match.params))

    def generate(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build the canonical URL of a named route.

        Raises:
            PatternEngineError: unknown name, missing required parameter or
                a value its placeholder does not accept
        """
        return self._engine.generate(name, params)


class Router(Routable):
    """Request Router.

    Routes are registered first and compiled on first use; from then on the
    table is frozen and new registrations fail. Changing the base path drops
    the compiled table so it is rebuilt on next use.

    Usage:
        router = Router()
        router.get("/posts/{id}", show_post).name("posts.show").where("id", "[0-9]+")
        router.group("admin", lambda group: group.get("users", list_users))

        response = router.match(Request.create("/posts/123"))
        router.url("posts.show", {"id": 123})  # "/posts/123/"
    """

    def __init__(
        self,
        config: Optional[RouterConfig] = None,
        controllers: Optional[ControllerRegistry] = None,
    ):
        self.config = config or RouterConfig()
        self.controllers = controllers
        self._routes: List[Route] = []
        self._compiler = ParamPatternCompiler()
        self._compiled: Optional[CompiledRouter] = None
        self._base_path = "/"
        self.set_base_path(self.config.base_path)

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def frozen(self) -> bool:
        return self._compiled is not None

    @property
    def routes(self) -> Tuple[Route, ...]:
        return tuple(self._routes)

    def set_base_path(self, base_path: str) -> None:
        """Set the prefix applied ahead of every route.

        The path is normalized to one leading and one trailing slash. Any
        compiled table is discarded and registrations are accepted again
        until the next match or url call.
        """
        self._base_path = add_leading_slash(add_trailing_slash(base_path))

        if self._compiled is not None:
            logger.debug(f"Base path changed to {self._base_path!r}, recompiling on next use")
            self._compiled = None
            for route in self._routes:
                route.thaw()

    def map(self, methods: Sequence[str], uri: str, action: Any) -> Route:
        """Register a route.

        Args:
            methods: HTTP methods, any case
            uri: URI template, e.g. ``posts/{id}/comments/{commentId?}``
            action: Callable or ``"package.module.Class@method"`` string

        Raises:
            TooLateToAddNewRouteError: the router has already been used
        """
        if self._compiled is not None:
            raise TooLateToAddNewRouteError()

        route = Route(methods, uri, action, self.controllers)
        self._routes.append(route)
        return route

    def group(self, prefix: str, callback: Callable[[RouteGroup], Any]) -> "Router":
        """Register the routes added by callback under a URI prefix."""
        callback(RouteGroup(prefix, self))
        return self

    def build(self) -> CompiledRouter:
        """Compile the route table and freeze it. Idempotent.

        Raises:
            InvalidRouteConstraintError: a route does not compile; nothing is
                frozen, so the route can be corrected and the build retried
        """
        if self._compiled is None:
            compiled = CompiledRouter.build(self._routes, self._base_path, self._compiler)
            for route in self._routes:
                route.freeze()
            self._compiled = compiled
        return self._compiled

    def has(self, name: str) -> bool:
        """Check whether any route carries the given name."""
        return any(route.route_name == name for route in self._routes)

    def find(self, method: str, path: str) -> Optional[RouteMatch]:
        """Find the route for method and path (no query string) without dispatching it."""
        return self.build().find(method, path)

    def match(self, request: Request) -> Response:
        """Match the request against the routes and return a Response.

        Unmatched requests yield a 404 response rather than an error.
        """
        found = self.find(request.method, request.path)

        if found is None:
            logger.debug(f"No route for {request.method} {request.path}")
            return Response.text(self.config.not_found_body, status=404)

        logger.debug(f"{request.method} {request.path} -> {found.route!r}")
        return self.handle(found.route.action, found.params, request)

    def handle(self, action: Any, params: RouteParams, request: Request) -> Response:
        """Invoke a matched action and normalize its result to a Response."""
        if not callable(action):
            raise RouteTargetNotCallableError(f"Route target is not callable: {action!r}")

        result = action(params, request)

        # Responses pass through untouched
        if isinstance(result, Response):
            return result

        if result is None:
            result = b""
        elif not isinstance(result, (bytes, str)):
            result = str(result)

        return Response(result, 200, {"Content-Type": self.config.content_type})

    def url(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Generate the canonical URL (with trailing slash) of a named route.

        Raises:
            RouteParamFailedConstraintError: a value fails its route constraint
            NamedRouteNotFoundError: unknown name, missing required parameter or
                a value that would not route back to the same route
        """
        compiled = self.build()
        params = dict(params or {})

        matched_route = None
        for route in compiled.routes:
            if route.route_name == name:
                matched_route = route

        if matched_route is not None:
            self._check_constraints(matched_route, params)

        try:
            return compiled.generate(name, params)
        except PatternEngineError as exc:
            raise NamedRouteNotFoundError(name) from exc

    @staticmethod
    def _check_constraints(route: Route, params: Dict[str, Any]) -> None:
        constraints = route.param_constraints
        for key, value in params.items():
            regex = constraints.get(key)
            if regex and value is not None and not re.fullmatch(regex, str(value)):
                raise RouteParamFailedConstraintError(route.route_name, key, value, regex)


__all__ = [
    "CompiledRouter",
    "RouteMatch",
    "Router",
]
