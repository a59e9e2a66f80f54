"""WSGI adapter - Serve a Router from a WSGI server.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Tuple

from signpost_core.http.request import Request, Response
from signpost_core.routing.router import Router
from signpost_core.utils.helpers import parse_query

logger = logging.getLogger(__name__)


def request_from_environ(environ: Dict[str, Any]) -> Request:
    """Build a Request from a WSGI environ."""
    headers = {}
    for key, value in environ.items():
        if key.startswith("HTTP_"):
            headers[key[5:].replace("_", "-").title()] = value
        elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
            headers[key.replace("_", "-").title()] = value

    body = b""
    try:
        length = int(environ.get("CONTENT_LENGTH") or 0)
    except ValueError:
        length = 0
    if length > 0:
        body = environ["wsgi.input"].read(length)

    path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")

    # PATH_INFO is already decoded, a "?" in it belongs to the path
    return Request(
        method=environ.get("REQUEST_METHOD", "GET"),
        path=path,
        headers=headers,
        query=parse_query(environ.get("QUERY_STRING", "")),
        body=body,
    )


class RouterApplication:
    """WSGI application dispatching every request through a Router.

    Usage:
        from wsgiref.simple_server import make_server

        app = RouterApplication(router)
        make_server("127.0.0.1", 8000, app).serve_forever()
    """

    def __init__(self, router: Router):
        self.router = router

    def __call__(
        self,
        environ: Dict[str, Any],
        start_response: Callable[[str, List[Tuple[str, str]]], Any],
    ) -> Iterable[bytes]:
        request = request_from_environ(environ)
        response = self.router.match(request)

        logger.info(f"{request.method} {request.path} {response.status}")
        start_response(_status_line(response), _header_list(response))
        return [response.body]


def _status_line(response: Response) -> str:
    return f"{response.status} {response.status_message}"


def _header_list(response: Response) -> List[Tuple[str, str]]:
    headers = dict(response.headers)
    if not any(key.lower() == "content-length" for key in headers):
        headers["Content-Length"] = str(len(response.body))
    return list(headers.items())


__all__ = [
    "RouterApplication",
    "request_from_environ",
]
