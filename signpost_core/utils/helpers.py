"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Dict, Tuple
from urllib.parse import parse_qsl


def trim_slashes(path: str) -> str:
    """Strip surrounding spaces and slashes."""
    return path.strip(" /")


def add_leading_slash(path: str) -> str:
    """Ensure path starts with exactly one slash."""
    return "/" + path.lstrip(" /")


def add_trailing_slash(path: str) -> str:
    """Ensure path ends with exactly one slash."""
    return path.rstrip(" /") + "/"


def remove_trailing_slash(path: str) -> str:
    """Remove any trailing slashes."""
    return path.rstrip(" /")


def parse_query(query_string: str) -> Dict[str, str]:
    """Parse a query string, keeping blank values."""
    return dict(parse_qsl(query_string, keep_blank_values=True))


def split_query(uri: str) -> Tuple[str, Dict[str, str]]:
    """Split a raw request URI into path and query parameters."""
    if "?" not in uri:
        return uri, {}

    path, query_string = uri.split("?", 1)
    return path, parse_query(query_string)


__all__ = [
    "trim_slashes",
    "add_leading_slash",
    "add_trailing_slash",
    "remove_trailing_slash",
    "parse_query",
    "split_query",
]
