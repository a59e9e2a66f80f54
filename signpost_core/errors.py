"""Errors - Exception hierarchy for route configuration, generation and dispatch.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any


class SignpostError(Exception):
    """Base for all signpost errors."""
    pass


class RouteConfigurationError(SignpostError):
    """Raised while routes are being registered."""
    pass


class RouteClassStringParseError(RouteConfigurationError):
    """Raised when a ``Class@method`` action string cannot be parsed."""
    pass


class RouteControllerNotFoundError(RouteConfigurationError):
    """Raised when the controller named by an action string does not exist."""
    pass


class RouteControllerMethodNotFoundError(RouteConfigurationError):
    """Raised when the controller has no such method."""
    pass


class RouteNameRedefinedError(RouteConfigurationError):
    """Raised when a route that already has a name is named again."""
    pass


class TooLateToAddNewRouteError(RouteConfigurationError):
    """Raised when a route is registered after the table was compiled."""

    def __init__(self, message: str = "Routes can not be added once the router has been used"):
        super().__init__(message)


class TooLateToModifyRouteError(RouteConfigurationError):
    """Raised when a route is renamed or constrained after the table was compiled."""
    pass


class InvalidRouteConstraintError(RouteConfigurationError):
    """Raised when a route pattern or constraint regex does not compile."""

    def __init__(self, uri: str, reason: str):
        self.uri = uri
        self.reason = reason
        super().__init__(f"Route `{uri}` could not be compiled: {reason}")


class UrlGenerationError(SignpostError):
    """Raised when a URL can not be generated for a named route."""
    pass


class NamedRouteNotFoundError(UrlGenerationError):
    """Raised when no URL can be built for the requested route name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No named route `{name}` could be generated")


class RouteParamFailedConstraintError(UrlGenerationError):
    """Raised when a URL parameter value does not satisfy its constraint."""

    def __init__(self, route_name: str, param: str, value: Any, regex: str):
        self.route_name = route_name
        self.param = param
        self.value = value
        self.regex = regex
        super().__init__(
            f"Value `{value}` for param `{param}` of route `{route_name}` "
            f"fails constraint `{regex}`"
        )


class RouteDispatchError(SignpostError):
    """Raised when a matched route can not be dispatched."""
    pass


class RouteTargetNotCallableError(RouteDispatchError):
    """Raised when the matched route's action is not callable."""
    pass


__all__ = [
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
]
