"""
Global Exception Handlers
Render every error as a standard ErrorResponse body
"""

import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..config import settings
from ..logging import get_logger
from .base import AppException
from .codes import ErrorCode
from .schemas import ErrorDetail, ErrorResponse, ValidationErrorResponse

logger = get_logger(__name__)


def _request_context(request: Request) -> Dict[str, str]:
    return {
        "request_id": getattr(request.state, "request_id", None) or str(uuid.uuid4()),
        "path": str(request.url.path),
        "method": request.method,
    }


def _error_response(
    request_context: Dict[str, str],
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        status_code=status_code,
        request_id=request_context["request_id"],
        path=request_context["path"],
        details=details or None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    AppException handler

    Args:
        request: FastAPI Request
        exc: AppException instance

    Returns:
        JSONResponse: ErrorResponse with the exception's code and status
    """
    context = _request_context(request)
    logger.error(
        exc.message,
        error_code=exc.error_code,
        status_code=exc.status_code,
        details=exc.details,
        **context,
    )
    return _error_response(context, exc.status_code, exc.error_code, exc.message, exc.details)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request validation errors (422)"""
    context = _request_context(request)
    errors = [
        ErrorDetail(
            field=" -> ".join(str(loc) for loc in error["loc"]),
            message=error["msg"],
            code=error.get("type", ""),
        )
        for error in exc.errors()
    ]
    logger.warning("Request validation failed", error_count=len(errors), **context)

    body = ValidationErrorResponse(
        error_code=ErrorCode.VAL_INVALID_INPUT.value,
        request_id=context["request_id"],
        path=context["path"],
        errors=errors,
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(mode="json"),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for unexpected errors (500). Details are only exposed in debug mode."""
    context = _request_context(request)
    logger.error(
        f"Unexpected exception: {exc}",
        exception_type=type(exc).__name__,
        exc_info=exc,
        **context,
    )

    details = {"error": str(exc), "type": type(exc).__name__} if settings.debug else None
    return _error_response(
        context,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorCode.SYS_INTERNAL_ERROR.value,
        "An internal server error occurred. Please try again later.",
        details,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the global handlers to the application"""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
