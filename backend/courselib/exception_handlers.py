"""Centralized exception handlers for the FastAPI application.

Maps domain exceptions raised by the engine, repositories and routes to
HTTP responses so routes can let them propagate.

Usage in main.py:
    from courselib.exception_handlers import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from courselib.mapping import (
    EmptySortSpecificationError,
    MappingNotFoundError,
    UnknownSortFieldError,
)
from courselib.negotiation import InvalidMediaTypeError, NotAcceptableError
from courselib.repositories import AuthorNotFoundError, CourseNotFoundError
from courselib.routes.author_collections import InvalidIdentifierListError
from courselib.shaping import InvalidFieldError, InvalidFieldSelectionError
from courselib.validation import PayloadValidationError, ValidationFailure, failures_from_errors

logger = logging.getLogger(__name__)

_NOT_FOUND_EXCEPTIONS: list[type[Exception]] = [
    AuthorNotFoundError,
    CourseNotFoundError,
]

_BAD_REQUEST_EXCEPTIONS: list[type[Exception]] = [
    UnknownSortFieldError,
    EmptySortSpecificationError,
    InvalidFieldSelectionError,
    InvalidMediaTypeError,
    InvalidIdentifierListError,
]

# Server-side contract violations: never the client's fault
_INTERNAL_EXCEPTIONS: list[type[Exception]] = [
    MappingNotFoundError,
    InvalidFieldError,
]


def _make_handler(status_code: int):
    """Create an exception handler that returns ``{"detail": str(exc)}``."""

    async def handler(_request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc)},
        )

    return handler


def _failures_response(failures: list[ValidationFailure]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "title": "One or more validation errors occurred.",
            "detail": [{"field": f.field, "message": f.message} for f in failures],
        },
    )


async def _payload_validation_handler(
    _request: Request, exc: PayloadValidationError
) -> JSONResponse:
    """Report every validation failure with 422 Unprocessable Entity."""
    return _failures_response(exc.failures)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report request parsing errors in the same shape as payload failures."""
    logger.info("Rejected request to %s %s: %s", request.method, request.url.path, exc.errors())
    return _failures_response(failures_from_errors(exc.errors()))


async def _internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the contract violation and return a generic 500."""
    logger.error(
        "Internal contract violation on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected fault happened. Try again later."},
    )


async def _unhandled_exception_handler(request: Request, _exc: Exception) -> JSONResponse:
    """Catch-all: log the traceback, return a generic message."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "An unexpected fault happened. Try again later."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on ``app``.

    Call once after creating the app instance.
    """
    not_found_handler = _make_handler(404)
    for exc_class in _NOT_FOUND_EXCEPTIONS:
        app.add_exception_handler(exc_class, not_found_handler)

    bad_request_handler = _make_handler(400)
    for exc_class in _BAD_REQUEST_EXCEPTIONS:
        app.add_exception_handler(exc_class, bad_request_handler)

    app.add_exception_handler(NotAcceptableError, _make_handler(406))
    app.add_exception_handler(PayloadValidationError, _payload_validation_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    for exc_class in _INTERNAL_EXCEPTIONS:
        app.add_exception_handler(exc_class, _internal_error_handler)

    app.add_exception_handler(Exception, _unhandled_exception_handler)

    logger.info("Registered exception handlers")
