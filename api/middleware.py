"""
Global middleware and error mapping.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from auth.exceptions import UserServiceError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong"


def _validation_errors(exc: RequestValidationError) -> list:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
        })
    return errors


def register_middleware(app: FastAPI) -> None:
    """Attach app-level middleware and exception handlers."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Validation failed", "errors": _validation_errors(exc)},
        )

    @app.exception_handler(UserServiceError)
    async def user_service_error_handler(request: Request, exc: UserServiceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    # a handler for plain Exception would run outside all middleware (CORS
    # included), so the catch-all stays a middleware
    @app.middleware("http")
    async def unhandled_error(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": GENERIC_ERROR},
            )

    @app.middleware("http")
    async def request_timer(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        logger.debug("%s %s — %.3fs", request.method, request.url.path, elapsed)
        return response
