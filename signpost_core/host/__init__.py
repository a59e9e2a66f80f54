"""Host module - Adapters for serving a router."""

from signpost_core.host.wsgi import RouterApplication, request_from_environ

__all__ = [
    "RouterApplication",
    "request_from_environ",
]
