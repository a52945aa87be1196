"""
Resource API - Request Logging Middleware
===========================================

What:  One access-log line per HTTP request, written after the response.
How:   Times call_next, then logs at a level derived from the status code.
       The matched route template (/resources/{resource_id}) is logged next
       to the concrete path so lines for the same endpoint group together.
When:  Runs inside RequestIDMiddleware, so the request id is already set.

Example line:
    2024-01-15T12:00:00 [WARNING] resource_api.access: GET /resources/{resource_id} -> 404 (3.1ms) path=/resources/42 rid=1a2b3c4d ip=10.0.0.7

Status → level:
    5xx → ERROR     the request failed on our side
    4xx → WARNING   rejected input or unknown id
    else → INFO

Request bodies are never logged: comments and resource descriptions are
user-written text.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from resource_api.middleware.request_id import request_id_var

logger = logging.getLogger("resource_api.access")

# Load balancers poll these every few seconds
SKIPPED_PATHS = frozenset({"/health"})


def _level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _route_template(request: Request) -> str:
    # The router stores the matched route in the shared scope; unmatched
    # requests (404 from routing, CORS preflight) fall back to the raw path.
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "route": _route_template(request),
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": elapsed_ms,
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            _level_for_status(response.status_code),
            "%(method)s %(route)s -> %(status)d (%(duration_ms).1fms) "
            "path=%(path)s rid=%(request_id)s ip=%(client_ip)s",
            fields,
            extra=fields,
        )
        return response
