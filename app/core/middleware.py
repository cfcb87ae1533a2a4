# app/core/middleware.py
"""
Core middleware registration for the FastAPI application.

Request tracking and timing. Every response carries X-Request-ID and
X-Process-Time, and every request is logged once on completion.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable, Optional

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.logging import get_logger, request_id as request_id_var

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Adds a unique request ID to each incoming request.

    The ID is taken from the incoming header when an upstream proxy set one,
    stored in request.state.request_id, bound into the logging context and
    echoed back in the response headers.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
            request_id_var.reset(token)

        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Measures request processing time and logs the completed request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "Request completed",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
                "client_host": request.client.host if request.client else None,
            },
        )
        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register core middlewares on the application.

    Middlewares run in reverse order of registration, so the request ID is
    assigned before timing starts and is available to the timing log line.
    """
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)


def get_request_id(request: Request) -> Optional[str]:
    """Return the request ID of the current request, if any."""
    return getattr(request.state, "request_id", None)


__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "register_middlewares",
    "get_request_id",
]
