"""Routing module - Route table, matching and URL generation."""

from signpost_core.routing.base import Routable
from signpost_core.routing.compiler import CompiledTemplate, ParamPatternCompiler, ParamSpec
from signpost_core.routing.group import RouteGroup
from signpost_core.routing.matcher import PatternEngine, PatternEngineError
from signpost_core.routing.params import RouteParams
from signpost_core.routing.route import (
    ControllerRegistry,
    DirectHandler,
    ResolvedMethod,
    Route,
)
from signpost_core.routing.router import CompiledRouter, RouteMatch, Router

__all__ = [
    "Routable",
    "CompiledTemplate",
    "ParamPatternCompiler",
    "ParamSpec",
    "RouteGroup",
    "PatternEngine",
    "PatternEngineError",
    "RouteParams",
    "ControllerRegistry",
    "DirectHandler",
    "ResolvedMethod",
    "Route",
    "CompiledRouter",
    "RouteMatch",
    "Router",
]
