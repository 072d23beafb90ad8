"""
Centralised error handling — exception hierarchy + FastAPI handlers.

Provides:
    • One exception class per failure stage of the fetch pipeline
    • Consistent JSON error response format for the read API
    • Logging of errors at the API boundary (never inside the pipeline)

Every pipeline error reaches the caller unchanged. Nothing below the API
layer retries, logs-and-swallows, or returns a partial WarningList.

Usage:
    from dwd_alerts.core.errors import (
        DwdAlertsError,
        TransportError,
        ResponseShapeError,
        DeserializationError,
        DateParsingError,
        register_error_handlers,
    )

    raise DateParsingError(value=7346982752374653336, field="start")
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dwd_alerts.core.config import settings

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Exception Hierarchy
# ═══════════════════════════════════════════════════════════════════════════

class DwdAlertsError(Exception):
    """Base exception for all errors raised by this package."""

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        *,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class TransportError(DwdAlertsError):
    """The GET against the warnings endpoint failed (network or HTTP status)."""

    def __init__(self, url: str, message: str = "", **details: Any):
        super().__init__(
            message=f"Request to '{url}' failed: {message}",
            status_code=502,
            error_code="TRANSPORT_ERROR",
            details={"url": url, **details},
        )


class ResponseShapeError(DwdAlertsError):
    """The body is not wrapped as ``warnWetter.loadWarnings(...);``."""

    def __init__(self, missing: str, **details: Any):
        super().__init__(
            message=f"Unexpected response shape: missing {missing}",
            status_code=502,
            error_code="RESPONSE_SHAPE_ERROR",
            details={"missing": missing, **details},
        )


class DeserializationError(DwdAlertsError):
    """The unwrapped payload is not valid JSON or does not match the schema."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(
            message=f"Could not deserialize warnings payload: {message}",
            status_code=502,
            error_code="DESERIALIZATION_ERROR",
            details={"errors": errors or []},
        )
        self.errors = errors or []


class DateParsingError(DwdAlertsError):
    """An epoch-millisecond timestamp is outside the representable range."""

    def __init__(self, value: Any, field: str = "time"):
        super().__init__(
            message=f"Timestamp {value!r} in '{field}' is out of range",
            status_code=502,
            error_code="DATE_PARSING_ERROR",
            details={"value": value, "field": field},
        )
        self.value = value
        self.field = field


# ═══════════════════════════════════════════════════════════════════════════
# Error Response Builder
# ═══════════════════════════════════════════════════════════════════════════

def _build_error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request: Optional[Request] = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: Dict[str, Any] = {
        "error": {
            "code": error_code,
            "message": message,
            "status": status_code,
        }
    }

    if details:
        body["error"]["details"] = details

    # Include request path in non-production
    if request and not settings.is_production:
        body["error"]["path"] = str(request.url.path)
        body["error"]["method"] = request.method

    return JSONResponse(status_code=status_code, content=body)


# ═══════════════════════════════════════════════════════════════════════════
# FastAPI Exception Handlers
# ═══════════════════════════════════════════════════════════════════════════

def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(DwdAlertsError)
    async def handle_dwd_error(request: Request, exc: DwdAlertsError):
        logger.error(
            "Upstream error [%s]: %s | details=%s",
            exc.error_code, exc.message, exc.details,
        )
        return _build_error_response(
            exc.status_code, exc.error_code, exc.message,
            exc.details, request,
        )

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.critical(
            "Unhandled exception: %s\n%s",
            exc, traceback.format_exc(),
        )
        message = str(exc) if settings.DEBUG else "Internal server error"
        details = (
            {"traceback": traceback.format_exc().split("\n")}
            if settings.DEBUG else None
        )
        return _build_error_response(
            500, "INTERNAL_ERROR", message, details, request,
        )
