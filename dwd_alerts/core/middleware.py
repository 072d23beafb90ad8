"""
Request middleware for the read API.

Every request gets a correlation ID (taken from ``X-Request-ID`` or
generated), an ``X-Process-Time`` response header and one log line. The
request context used by the log formatters is cleared when the request
ends, whether it succeeded or raised.
"""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from dwd_alerts.core.logging_config import set_request_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Not worth a log line each
_QUIET_PREFIXES = ("/docs", "/redoc", "/openapi", "/favicon", "/health")


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:16]
        path = request.url.path
        set_request_context(request_id=request_id, method=request.method, path=path)

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers[PROCESS_TIME_HEADER] = (
                f"{(time.perf_counter() - started) * 1000:.1f}ms"
            )
            return response
        finally:
            if not path.startswith(_QUIET_PREFIXES):
                duration_ms = (time.perf_counter() - started) * 1000
                logger.log(
                    _level_for(status_code),
                    "%s %s → %d (%.1fms)",
                    request.method, path, status_code, duration_ms,
                    extra={
                        "duration_ms": duration_ms,
                        "status_code": status_code,
                        "endpoint": path,
                    },
                )
            set_request_context()
