"""HTTP module - Request and response objects."""

from signpost_core.http.request import Request, Response

__all__ = [
    "Request",
    "Response",
]
