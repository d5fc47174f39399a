"""
Blog API - Request Logging Middleware
=======================================

What:  One access-log line per HTTP request: method, path, status, duration.
How:   Times the downstream call and logs at a level chosen by status code.
When:  Runs inside RequestIDMiddleware, so the request ID is already set.

Unexpected exceptions are turned into the generic 500 here rather than in
Starlette's outermost error middleware, so those responses still get an
access line and an X-Request-ID header on the way out.

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from blog_api.config import settings
from blog_api.middleware.request_id import request_id_var

logger = logging.getLogger("blog_api.access")
error_logger = logging.getLogger("blog_api.errors")


def unexpected_error_response(exc: Exception) -> JSONResponse:
    """Log the stack trace and build the generic 500 body."""
    rid = request_id_var.get("")
    error_logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "Oops! Something broke!",
            "request_id": rid,
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Level by status:
        5xx → ERROR, 4xx → WARNING, everything else → INFO

    The health route is skipped; probes hit it every few seconds.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path == f"{settings.api_prefix}/health":
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception as exc:
            response = unexpected_error_response(exc)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
