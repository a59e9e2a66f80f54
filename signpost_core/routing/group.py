"""Route Group - Prefix composition for route registration.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from signpost_core.routing.base import Routable
from signpost_core.routing.route import Route
from signpost_core.utils.helpers import trim_slashes


class RouteGroup(Routable):
    """Forwards registrations to a router with a URI prefix.

    Usage:
        def admin(group):
            group.get("users", list_users)          # admin/users
            group.group("reports", reports)         # admin/reports/...

        router.group("admin", admin)
    """

    def __init__(self, prefix: str, router: Routable):
        self.prefix = trim_slashes(prefix)
        self.router = router

    def _prefixed(self, uri: str) -> str:
        return f"{self.prefix}/{trim_slashes(uri)}"

    def map(self, methods: Sequence[str], uri: str, action: Any) -> Route:
        return self.router.map(methods, self._prefixed(uri), action)

    def group(self, prefix: str, callback: Callable[["RouteGroup"], Any]) -> "RouteGroup":
        callback(RouteGroup(self._prefixed(prefix), self.router))
        return self


__all__ = [
    "RouteGroup",
]
