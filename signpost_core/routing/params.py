"""Route parameters extracted from a matched path.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional


class RouteParams(Mapping):
    """Read-only mapping of parameter name to raw string value.

    Values are reachable by key or attribute; unknown names read as
    ``None`` either way, and ``in`` reports whether a value was captured::

        params.postId           # "123"
        params["postId"]        # "123"
        params.missing          # None
        params["missing"]       # None
        "missing" in params     # False
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Dict[str, str]] = None):
        object.__setattr__(self, "_values", dict(values or {}))

    def __getitem__(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Optional[str]:
        if name.startswith("__") or name == "_values":
            raise AttributeError(name)
        return self._values.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("RouteParams is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("RouteParams is read-only")

    def __repr__(self) -> str:
        return f"RouteParams({self._values!r})"


__all__ = [
    "RouteParams",
]
