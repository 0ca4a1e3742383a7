"""Problem-details responses and exception handlers for the HTTP API."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.application.cancellation import OperationCancelledError
from src.application.results import OperationResult, ResultStatus
from src.infrastructure.logging.logger import get_app_logger

PROBLEM_MEDIA_TYPE = "application/problem+json"

# Non-standard code used by proxies for a client that went away mid-request.
CLIENT_CLOSED_REQUEST = 499

STATUS_CODES = {
    ResultStatus.NOT_FOUND: 404,
    ResultStatus.VALIDATION_FAILED: 400,
    ResultStatus.CONFLICT: 409,
    ResultStatus.INTERNAL: 500,
}

TITLES = {
    400: "Invalid request",
    404: "Resource not found",
    409: "Conflict",
    500: "Internal server error",
    CLIENT_CLOSED_REQUEST: "Request cancelled",
}


def problem_response(
    request: Request,
    status_code: int,
    detail: str | None,
) -> JSONResponse:
    """Build an RFC 7807 problem-details response."""
    return JSONResponse(
        status_code=status_code,
        media_type=PROBLEM_MEDIA_TYPE,
        content={
            "status": status_code,
            "title": TITLES.get(status_code, "Error"),
            "detail": detail,
            "instance": request.url.path,
        },
    )


def result_error_response(
    request: Request,
    result: OperationResult,
) -> JSONResponse:
    """Translate a failed use case result into a problem response."""
    status_code = STATUS_CODES.get(result.status, 500)
    return problem_response(request, status_code, result.message)


async def _handle_request_validation(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return problem_response(request, 400, "; ".join(messages))


async def _handle_cancelled(
    request: Request,
    exc: OperationCancelledError,
) -> JSONResponse:
    get_app_logger().warning(f"Request cancelled: {request.url.path}")
    return problem_response(request, CLIENT_CLOSED_REQUEST, str(exc))


async def _handle_persistence_failure(
    request: Request,
    exc: SQLAlchemyError,
) -> JSONResponse:
    get_app_logger().exception(
        f"Persistence failure on {request.method} {request.url.path}: {exc}"
    )
    return problem_response(request, 500, "The data store is unavailable.")


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    get_app_logger().exception(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}"
    )
    return problem_response(request, 500, "An unexpected error occurred.")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API exception handlers to an application."""
    app.add_exception_handler(
        RequestValidationError,
        _handle_request_validation,
    )
    app.add_exception_handler(OperationCancelledError, _handle_cancelled)
    app.add_exception_handler(SQLAlchemyError, _handle_persistence_failure)
    app.add_exception_handler(Exception, _handle_unexpected)


__all__ = [
    "CLIENT_CLOSED_REQUEST",
    "PROBLEM_MEDIA_TYPE",
    "STATUS_CODES",
    "problem_response",
    "result_error_response",
    "register_exception_handlers",
]
