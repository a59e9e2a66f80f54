"""Request/Response - HTTP request and response objects.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from signpost_core.utils.helpers import add_leading_slash, split_query


@dataclass
class Request:
    """HTTP Request object.

    Only the method and path take part in routing; the rest is carried
    through to handlers untouched. ``path`` is a decoded path and is never
    split again, so a ``?`` in it is part of the path. Use ``create`` to
    build a request from a raw URI with a query string.
    """

    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    query: Dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self):
        self.method = self.method.upper()
        self.path = add_leading_slash(self.path)

    @property
    def content_type(self) -> str:
        """Get Content-Type header."""
        return self.get_header("Content-Type")

    def get_header(self, name: str, default: str = "") -> str:
        """Get header value (case-insensitive)."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return default

    @classmethod
    def create(
        cls,
        uri: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: bytes = b"",
        query: Optional[Dict[str, str]] = None,
    ) -> "Request":
        """Build a request for a raw URI, e.g. ``Request.create("/posts?page=2")``.

        Values passed in ``query`` win over those parsed from the URI.
        """
        path, uri_query = split_query(uri)
        uri_query.update(query or {})
        return cls(
            method=method,
            path=path,
            headers=dict(headers or {}),
            query=uri_query,
            body=body,
        )


@dataclass
class Response:
    """HTTP Response object."""

    body: Union[bytes, str] = b""
    status: int = 200
    headers: Dict[str, str] = field(default_factory=dict)

    # Common status messages
    STATUS_MESSAGES = {
        200: "OK",
        201: "Created",
        202: "Accepted",
        204: "No Content",
        301: "Moved Permanently",
        302: "Found",
        304: "Not Modified",
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        500: "Internal Server Error",
    }

    def __post_init__(self):
        if isinstance(self.body, str):
            self.body = self.body.encode()

    @property
    def content(self) -> str:
        """Get body as text."""
        return self.body.decode()

    @property
    def status_message(self) -> str:
        """Get status message."""
        return self.STATUS_MESSAGES.get(self.status, "Unknown")

    def get_header(self, name: str, default: str = "") -> str:
        """Get header value (case-insensitive)."""
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return default

    @classmethod
    def text(
        cls,
        text: str,
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> "Response":
        """Create text response."""
        resp_headers = dict(headers or {})
        resp_headers["Content-Type"] = "text/plain"
        return cls(body=text, status=status, headers=resp_headers)


__all__ = [
    "Request",
    "Response",
]
