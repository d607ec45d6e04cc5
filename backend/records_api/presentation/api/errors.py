"""Centralized error transformation for API routes.

Routes unwrap service results with ``unwrap``; an ``Err`` becomes an
``OperationErrorException`` that the registered handler renders as
``{"error": {"kind": ..., "reason": ...}}`` with the mapped status.
"""

import logging
from typing import TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from records_api.application.schemas import ErrorDetail, ErrorResponse
from records_api.config import Settings
from records_api.domain.exceptions import ErrorKind, OperationError, OperationErrorException
from records_api.domain.result import Err, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


def error_status(error: OperationError, settings: Settings) -> int:
    """HTTP status for an operation error under the current settings."""
    if error.kind is ErrorKind.CONFLICT and not settings.distinguish_conflict:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return error.status_hint


def unwrap(result: Result[T], settings: Settings) -> T:
    """Return the success value or raise the error for the exception handler."""
    if isinstance(result, Err):
        raise OperationErrorException(result.error, error_status(result.error, settings))
    return result.value


def error_response(
    error: OperationError,
    status_code: int,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(kind=error.kind.value, reason=error.reason))
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def _operation_error_handler(request: Request, exc: OperationErrorException) -> JSONResponse:
    logger.info(
        "%s %s → %d %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.error.kind.value,
    )
    return error_response(exc.error, exc.status_code)


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    reason = exc.detail if isinstance(exc.detail, str) else "HTTP error"
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        kind = ErrorKind.NOT_FOUND
    elif exc.status_code >= 500:
        kind = ErrorKind.INTERNAL_FAULT
    else:
        kind = ErrorKind.INVALID_INPUT
    error = OperationError(kind=kind, reason=reason, status_hint=exc.status_code)
    return error_response(error, exc.status_code, headers=exc.headers)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    error = OperationError.invalid_input(problems or "Invalid request")
    return error_response(error, status.HTTP_400_BAD_REQUEST)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(OperationError.internal_fault(), status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers that render every failure as a structured error body."""
    app.add_exception_handler(OperationErrorException, _operation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
