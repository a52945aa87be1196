"""
Resource API - Unhandled Error Middleware
===========================================

What:  Turns any exception that escaped the routes into a JSON 500.
How:   Sits innermost in the middleware stack, just outside the router.
       The response it builds travels back through CORS, logging and
       request-ID like any other response.
Why:   Starlette runs `exception_handler(Exception)` in the outermost
       ServerErrorMiddleware, outside CORS and request-ID. A browser would
       then see a CORS failure instead of the error body, and the body would
       carry no correlation id.

Application exceptions (ResourceAPIError and subclasses) never get here:
the handlers registered in main.py answer them first.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from resource_api.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


class UnhandledErrorMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc) or type(exc).__name__,
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content={
                    "error": "internal_server_error",
                    "message": "An unexpected error occurred. Please try again or contact support.",
                    "request_id": rid,
                },
            )
