"""Signpost - Request routing engine.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Signpost maps an incoming (method, path) pair to a registered handler,
extracts named path parameters and generates URLs back from route names:
- URI templates with {name} and optional {name?} placeholders
- Per-parameter regex constraints
- Trailing-slash equivalent matching
- Named routes with canonical URL generation
- Nestable route groups and a configurable base path
- Class@method action strings resolved at registration

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                               Signpost                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                              │
│  Registration                      Serving (frozen)                          │
│  ┌─────────────────────┐          ┌──────────────────────────────────────┐  │
│  │ Router / RouteGroup │  build() │ CompiledRouter                       │  │
│  │  map, get, post...  │ ───────▶ │  ParamPatternCompiler ─▶ PatternEngine│  │
│  │  .name(), .where()  │          │  find(method, path)  generate(name)  │  │
│  └─────────────────────┘          └──────────────────────────────────────┘  │
│                                                                              │
│  Request ──▶ Router.match ──▶ RouteMatch ──▶ action(params, request)         │
│                    │                               │                         │
│                    └── 404 Response        Response (passed through or       │
│                                            wrapped as 200 text/html)         │
└─────────────────────────────────────────────────────────────────────────────┘

Usage:
    from signpost_core import Request, Router

    router = Router()
    router.get("/posts/{postId}", show_post).name("posts.show").where("postId", "[0-9]+")
    router.group("admin", lambda group: group.get("users", list_users))

    response = router.match(Request.create("/posts/123"))
    router.url("posts.show", {"postId": 123})  # "/posts/123/"
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# HTTP
from signpost_core.http.request import Request, Response

# Routing
from signpost_core.routing.router import CompiledRouter, Router, RouteMatch
from signpost_core.routing.route import ControllerRegistry, Route
from signpost_core.routing.group import RouteGroup
from signpost_core.routing.params import RouteParams

# Errors
from signpost_core.errors import (
    SignpostError,
    RouteConfigurationError,
    RouteClassStringParseError,
    RouteControllerNotFoundError,
    RouteControllerMethodNotFoundError,
    RouteNameRedefinedError,
    TooLateToAddNewRouteError,
    TooLateToModifyRouteError,
    InvalidRouteConstraintError,
    UrlGenerationError,
    NamedRouteNotFoundError,
    RouteParamFailedConstraintError,
    RouteDispatchError,
    RouteTargetNotCallableError,
)

# Host
from signpost_core.host.wsgi import RouterApplication

# Utils
from signpost_core.utils.config import RouterConfig, load_config

__all__ = [
    # Version
    "__version__",
    # HTTP
    "Request",
    "Response",
    # Routing
    "CompiledRouter",
    "Router",
    "RouteMatch",
    "ControllerRegistry",
    "Route",
    "RouteGroup",
    "RouteParams",
    # Errors
    "SignpostError",
    "RouteConfigurationError",
    "RouteClassStringParseError",
    "RouteControllerNotFoundError",
    "RouteControllerMethodNotFoundError",
    "RouteNameRedefinedError",
    "TooLateToAddNewRouteError",
    "TooLateToModifyRouteError",
    "InvalidRouteConstraintError",
    "UrlGenerationError",
    "NamedRouteNotFoundError",
    "RouteParamFailedConstraintError",
    "RouteDispatchError",
    "RouteTargetNotCallableError",
    # Host
    "RouterApplication",
    # Utils
    "RouterConfig",
    "load_config",
]
