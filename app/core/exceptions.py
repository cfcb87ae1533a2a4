"""
Exception handlers for the Hostel Desk API.

Service-layer errors are translated to HTTP responses here so routes never
build error payloads themselves. Every error body has the shape
``{"message": str, ...details}``.
"""

from typing import Any, Dict, List, Tuple, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config.settings import settings
from app.core.logging import get_logger
from app.core.middleware import get_request_id
from app.services.common.errors import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolation,
    ConflictError,
    NotFoundError,
    ServiceError,
    ValidationError,
)

logger = get_logger(__name__)

# Most specific first; the first isinstance match wins.
STATUS_BY_ERROR: List[Tuple[Type[ServiceError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolation, status.HTTP_400_BAD_REQUEST),
]


def status_for(exc: ServiceError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"message": message}
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code = status_for(exc)
    body = error_body(exc.message, **exc.details)

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    log = logger.error if status_code >= 500 else logger.info
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "status_code": status_code,
            "path": request.url.path,
            "method": request.method,
            "request_id": get_request_id(request),
        },
    )
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _field_name(loc: Tuple[Any, ...]) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI adds to every location.
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return ".".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": _field_name(tuple(error.get("loc", ()))), "message": error.get("msg", "Invalid value")}
        for error in exc.errors()
    ]
    logger.info(
        "Request validation failed",
        extra={"path": request.url.path, "error_count": len(errors)},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation failed", errors=errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"Unhandled exception: {type(exc).__name__}",
        extra={"path": request.url.path, "method": request.method, "request_id": get_request_id(request)},
    )
    detail = None if settings.is_production() else str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Server error", error=detail),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "STATUS_BY_ERROR",
    "error_body",
    "register_exception_handlers",
    "status_for",
]
