"""Application error types and the handlers that turn them into JSON responses"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, resource: str = "Resource", resource_id: Any = None):
        if resource_id is not None:
            message = f"{resource} with id {resource_id} not found"
        else:
            message = f"{resource} not found"
        super().__init__(message)


class RateLimitError(AppError):
    status_code = 429
    code = "RATE_LIMIT_EXCEEDED"

    def __init__(self, retry_after: int):
        super().__init__("Rate limit exceeded", details={"retry_after": retry_after})
        self.retry_after = retry_after


class AuthenticationError(AppError):
    status_code = 401
    code = "UNAUTHORIZED"


class ServiceUnavailableError(AppError):
    status_code = 503
    code = "SERVICE_UNAVAILABLE"


class ExternalServiceError(AppError):
    status_code = 502
    code = "EXTERNAL_SERVICE_ERROR"

    def __init__(self, service: str, message: str, details: Any = None):
        super().__init__(f"{service} service error: {message}", details=details)
        self.service = service


def _error_body(request: Request, message: str, code: str, details: Any = None) -> dict:
    error = {"message": message, "code": code}
    if details is not None:
        error["details"] = details
    return {
        "success": False,
        "error": error,
        "request_id": getattr(request.state, "request_id", None),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    details = exc.details
    if exc.status_code >= 500 and settings.is_production:
        details = None

    headers = {}
    if isinstance(exc, RateLimitError):
        headers["Retry-After"] = str(exc.retry_after)
    elif isinstance(exc, AuthenticationError):
        headers["WWW-Authenticate"] = "Bearer"

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.message, exc.code, details),
        headers=headers,
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({
            "field": ".".join(loc),
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type", "value_error"),
        })

    logger.info(f"Validation failed on {request.method} {request.url.path}: {len(details)} error(s)")

    return JSONResponse(
        status_code=400,
        content=_error_body(request, "Validation failed", "VALIDATION_ERROR", details),
    )


_HTTP_ERROR_CODES = {
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, str(exc.detail), code),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")

    message = "Internal server error"
    details = None
    if not settings.is_production:
        details = {"error": str(exc), "type": type(exc).__name__}

    return JSONResponse(
        status_code=500,
        content=_error_body(request, message, "INTERNAL_ERROR", details),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
