"""Routable - Registration surface shared by routers and groups.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from signpost_core.routing.route import Route


class Routable(ABC):
    """Anything routes can be registered on.

    Subclasses provide ``map`` and ``group``; the verb shortcuts are
    built on ``map``.
    """

    @abstractmethod
    def map(self, methods: Sequence[str], uri: str, action: Any) -> Route:
        """Register a route for the given methods."""
        pass

    @abstractmethod
    def group(self, prefix: str, callback: Callable[[Any], Any]) -> "Routable":
        """Register the routes added by callback under a URI prefix."""
        pass

    def get(self, uri: str, action: Any) -> Route:
        """Add GET route."""
        return self.map(["GET"], uri, action)

    def post(self, uri: str, action: Any) -> Route:
        """Add POST route."""
        return self.map(["POST"], uri, action)

    def put(self, uri: str, action: Any) -> Route:
        """Add PUT route."""
        return self.map(["PUT"], uri, action)

    def patch(self, uri: str, action: Any) -> Route:
        """Add PATCH route."""
        return self.map(["PATCH"], uri, action)

    def delete(self, uri: str, action: Any) -> Route:
        """Add DELETE route."""
        return self.map(["DELETE"], uri, action)

    def options(self, uri: str, action: Any) -> Route:
        """Add OPTIONS route."""
        return self.map(["OPTIONS"], uri, action)


__all__ = [
    "Routable",
]
