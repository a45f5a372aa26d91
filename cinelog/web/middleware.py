"""
HTTP middleware: HTML-form method override and request logging.
"""

import logging
import time
from urllib.parse import parse_qs

from fastapi import Request

logger = logging.getLogger(__name__)

OVERRIDE_PARAM = "_method"
OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    """
    Let HTML forms issue PUT/PATCH/DELETE requests.

    A ``POST`` whose query string carries ``_method=PUT`` (or PATCH/DELETE)
    is routed as that method. Any other request passes through unchanged.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            override = query.get(OVERRIDE_PARAM, [""])[0].upper()
            if override in OVERRIDABLE_METHODS:
                scope = dict(scope, method=override)
        await self.app(scope, receive, send)


async def log_requests(request: Request, call_next):
    """Log one line per request with status and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %d %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
