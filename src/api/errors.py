"""
Exception handlers.

Every error leaves the API as ``{"error": ...}`` (plus ``details`` for store
failures) instead of FastAPI's default ``{"detail": ...}`` shape.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from src.domain.validation import InvalidFieldError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An error with a fixed HTTP status and a client-facing message."""

    def __init__(
        self, status_code: int, error: str, details: Optional[str] = None
    ):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    body = {"error": exc.error}
    if exc.details is not None:
        body["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=body)


async def _invalid_field_handler(
    request: Request, exc: InvalidFieldError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    reason = errors[0].get("msg", "invalid value") if errors else "invalid value"
    return JSONResponse(
        status_code=400,
        content={"error": f"Malformed request: {reason.rstrip('.')}."},
    )


async def catch_unhandled_errors(request: Request, call_next) -> Response:
    """Turn any uncaught exception into a generic 500.

    Runs as HTTP middleware rather than an ``Exception`` handler so that it
    sits inside ``CORSMiddleware`` and the 500 still carries CORS headers.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500, content={"error": "Something went wrong on the server!"}
        )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(InvalidFieldError, _invalid_field_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
