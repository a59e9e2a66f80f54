"""Route - Route definition and action resolution.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import importlib
import inspect
import logging
from collections import abc
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Type, Union

from signpost_core.errors import (
    RouteClassStringParseError,
    RouteControllerMethodNotFoundError,
    RouteControllerNotFoundError,
    RouteNameRedefinedError,
    TooLateToModifyRouteError,
)
from signpost_core.utils.helpers import trim_slashes

logger = logging.getLogger(__name__)

ACTION_SEPARATOR = "@"


def _positional_arity(func: Callable) -> Optional[int]:
    """Number of positional arguments func accepts, None if unbounded."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def _invoke(func: Callable, arity: Optional[int], params: Any, request: Any) -> Any:
    args = (params, request)
    if arity is not None:
        args = args[:arity]
    return func(*args)


class DirectHandler:
    """Action wrapping a plain callable."""

    __slots__ = ("func", "arity")

    def __init__(self, func: Callable):
        self.func = func
        self.arity = _positional_arity(func)

    def __call__(self, params: Any = None, request: Any = None) -> Any:
        return _invoke(self.func, self.arity, params, request)

    def __repr__(self) -> str:
        return f"DirectHandler({getattr(self.func, '__qualname__', self.func)!r})"


class ResolvedMethod:
    """Action bound to a controller class and method name.

    The controller is instantiated with no arguments on every call.
    """

    __slots__ = ("controller", "method_name")

    def __init__(self, controller: Type, method_name: str):
        self.controller = controller
        self.method_name = method_name

    def __call__(self, params: Any = None, request: Any = None) -> Any:
        method = getattr(self.controller(), self.method_name)
        return _invoke(method, _positional_arity(method), params, request)

    def __repr__(self) -> str:
        return f"ResolvedMethod({self.controller.__qualname__}@{self.method_name})"


Action = Union[DirectHandler, ResolvedMethod]


class ControllerRegistry:
    """Short names for controller classes used in action strings.

    Usage:
        controllers = ControllerRegistry()

        @controllers.register("posts")
        class PostController:
            def show(self, params, request): ...

        router = Router(controllers=controllers)
        router.get("posts/{id}", "posts@show")
    """

    def __init__(self, controllers: Optional[Mapping[str, Type]] = None):
        self._controllers: Dict[str, Type] = dict(controllers or {})

    def register(self, name: str, controller: Optional[Type] = None):
        """Register a controller, directly or as a class decorator."""
        if controller is not None:
            self._controllers[name] = controller
            return controller

        def decorator(cls: Type) -> Type:
            self._controllers[name] = cls
            return cls

        return decorator

    def get(self, name: str) -> Optional[Type]:
        return self._controllers.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._controllers


def _find_controller(class_path: str, registry: Optional[ControllerRegistry]) -> Type:
    if registry is not None and class_path in registry:
        return registry.get(class_path)

    module_name, _, class_name = class_path.rpartition(".")
    if not module_name:
        raise RouteControllerNotFoundError(
            f"Could not find route controller class: `{class_path}`"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise RouteControllerNotFoundError(
            f"Could not find route controller class: `{class_path}`"
        ) from exc

    controller = getattr(module, class_name, None)
    if not isinstance(controller, type):
        raise RouteControllerNotFoundError(
            f"Could not find route controller class: `{class_path}`"
        )
    return controller


def resolve_action(
    action: Any,
    controllers: Optional[ControllerRegistry] = None,
) -> Any:
    """Turn a route action into an invocable Action.

    Callables are wrapped as-is. Strings of the form
    ``"package.module.Class@method"`` (or ``"name@method"`` for a registered
    controller) are resolved now, so a bad string fails at registration.
    Anything else is returned unchanged and fails when dispatched.
    """
    if callable(action):
        return DirectHandler(action)

    if not isinstance(action, str):
        return action

    parts = action.split(ACTION_SEPARATOR)
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise RouteClassStringParseError(
            f"Could not parse route controller from string: `{action}`"
        )

    class_path, method_name = (part.strip() for part in parts)
    controller = _find_controller(class_path, controllers)

    if not callable(getattr(controller, method_name, None)):
        raise RouteControllerMethodNotFoundError(
            f"Route controller class: `{class_path}` does not have a `{method_name}` method"
        )

    logger.debug(f"Resolved action {action!r} to {controller.__qualname__}.{method_name}")
    return ResolvedMethod(controller, method_name)


class Route:
    """Route definition.

    Methods, URI template and action are fixed at construction. Name and
    parameter constraints can be added until the owning router compiles.

    Usage:
        route = Route(["get"], "/posts/{id}/", show_post)
        route.name("posts.show").where("id", "[0-9]+")
        route.uri      # "posts/{id}"
        route.methods  # ("GET",)
    """

    def __init__(
        self,
        methods: Sequence[str],
        uri: str,
        action: Any,
        controllers: Optional[ControllerRegistry] = None,
    ):
        self._methods: Tuple[str, ...] = tuple(dict.fromkeys(m.upper() for m in methods))
        self._uri = trim_slashes(uri)
        self._action = resolve_action(action, controllers)
        self._name: Optional[str] = None
        self._param_constraints: Dict[str, str] = {}
        self._frozen = False

    @property
    def methods(self) -> Tuple[str, ...]:
        return self._methods

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def action(self) -> Any:
        return self._action

    @property
    def route_name(self) -> Optional[str]:
        return self._name

    @property
    def param_constraints(self) -> Dict[str, str]:
        return dict(self._param_constraints)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def name(self, name: str) -> "Route":
        """Name the route for URL generation. A route can be named once."""
        self._ensure_mutable()
        if self._name is not None:
            raise RouteNameRedefinedError(
                f"Route `{self._uri}` is already named `{self._name}`"
            )

        self._name = name
        return self

    def where(
        self,
        param: Union[str, Mapping[str, str], None] = None,
        regex: Optional[str] = None,
    ) -> "Route":
        """Constrain parameters with a regex.

        Accepts ``where("id", "[0-9]+")`` or ``where({"id": "[0-9]+"})``.
        """
        self._ensure_mutable()
        if param is None:
            raise ValueError("No constraint given")
        if isinstance(param, abc.Mapping):
            self._param_constraints.update(param)
        elif regex is None:
            raise ValueError(f"No constraint given for param `{param}`")
        else:
            self._param_constraints[param] = regex

        return self

    def freeze(self) -> None:
        self._frozen = True

    def thaw(self) -> None:
        self._frozen = False

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise TooLateToModifyRouteError(
                f"Route `{self._uri}` can not be changed once the router has been used"
            )

    def __repr__(self) -> str:
        methods = "|".join(self._methods)
        return f"Route({methods} {self._uri!r}, name={self._name!r})"


__all__ = [
    "ACTION_SEPARATOR",
    "Action",
    "ControllerRegistry",
    "DirectHandler",
    "ResolvedMethod",
    "Route",
    "resolve_action",
]
