"""Exception handlers: every failure leaves the API as ``{"message", "code"}``.

Domain errors map to 400/404 by error code. Load errors and anything
unexpected become a generic 500 so file paths and tracebacks stay in the
logs.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from car_catalog.domain.errors import DomainError
from car_catalog.entrypoints.http.middleware import add_error_headers

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong on the server!"

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "LOAD_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _server_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": GENERIC_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError raised by a use case.

    Codes missing from STATUS_BY_ERROR_CODE are treated as client errors.
    Only message, code and field errors are sent; the error context is
    logged, never returned.
    """
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return _server_error()

    logger.info(
        "Client error",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "path": request.url.path,
            "method": request.method,
        },
    )

    body: dict[str, Any] = {"message": exc.message, "code": exc.error_code}
    field_errors = exc.to_dict().get("errors")
    if field_errors:
        body["errors"] = field_errors

    return JSONResponse(status_code=status_code, content=body)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request parsing failures as 400.

    Raised before a route runs, e.g. for a path or body parameter of
    the wrong type.
    """
    errors = []
    for problem in exc.errors():
        # "body" and "query" are location markers, not field names
        location = [str(part) for part in problem["loc"] if part not in ("body", "query")]
        errors.append(
            {
                "field": ".".join(location) or "body",
                "message": problem["msg"],
                "code": problem["type"],
            }
        )

    logger.info(
        "Request validation error",
        extra={"errors": errors, "path": request.url.path, "method": request.method},
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework HTTP errors; a 404 here means no route matched."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        content = {"message": f"Route not found: {request.url.path}", "code": "ROUTE_NOT_FOUND"}
    else:
        content = {"message": str(exc.detail), "code": "HTTP_ERROR"}

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for bugs: log with traceback, answer with the generic 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            "path": request.url.path,
            "method": request.method,
        },
    )
    response = _server_error()
    add_error_headers(request, response)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on ``app``. Call once per app."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered successfully")
