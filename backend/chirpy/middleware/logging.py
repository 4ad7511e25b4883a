"""
Chirpy Backend — Request Logging Middleware
=============================================

What:  One access log line per HTTP request.
How:   Measures time around call_next and logs method, path, status,
       duration, request ID and client IP on the "chirpy.access" logger.
When:  Runs inside RequestIDMiddleware so the request ID is already set.

Request bodies are never logged; chirps may contain user content.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from chirpy.middleware.request_id import request_id_var

logger = logging.getLogger("chirpy.access")

# Readiness probes hit this every few seconds
QUIET_PATHS = {"/api/healthz"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Log level follows the status code: 5xx → ERROR, 4xx → WARNING,
    everything else → INFO.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

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
