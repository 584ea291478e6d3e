"""Error kinds for the phonebook API and the single layer that renders them.

Route handlers and the store raise ``PhonebookError`` subclasses. Each one
carries an ``ErrorKind`` tag, and ``error_response`` is the only place that
turns a kind into an HTTP status and body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = "unknown endpoint"
MALFORMED_ID = "malformatted id"
INTERNAL_ERROR = "internal server error"


class ErrorKind(str, Enum):
    INPUT = "input"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class PhonebookError(Exception):
    """Base error. Subclasses set ``kind``."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InputError(PhonebookError):
    """The client sent something we can't use."""

    kind = ErrorKind.INPUT


class MalformedIdError(InputError):
    """Path id that does not parse as a record key."""

    def __init__(self, raw_id: str):
        super().__init__(MALFORMED_ID)
        self.raw_id = raw_id


@dataclass(frozen=True)
class FieldError:
    field: str
    reason: str


class PersonValidationError(InputError):
    """One or more person fields broke a schema constraint."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        details = ", ".join(f"{e.field}: {e.reason}" for e in self.errors)
        super().__init__(f"Person validation failed: {details}")


class NotFoundError(PhonebookError):
    kind = ErrorKind.NOT_FOUND


def error_response(exc: Exception) -> Response:
    """Render any exception as the client-facing response."""
    kind = exc.kind if isinstance(exc, PhonebookError) else ErrorKind.INTERNAL

    if kind is ErrorKind.INPUT:
        return JSONResponse(status_code=400, content={"error": exc.message})
    if kind is ErrorKind.NOT_FOUND:
        return Response(status_code=404)
    return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR})


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    # Drop the leading "body"/"path" segment
    loc = [str(part) for part in first.get("loc", ())[1:]]
    if loc:
        return f"{'.'.join(loc)}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "invalid request")


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers that map failures to responses."""

    @app.exception_handler(PhonebookError)
    async def handle_phonebook_error(request: Request, exc: PhonebookError):
        if exc.kind is ErrorKind.INTERNAL:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        else:
            logger.debug(f"{request.method} {request.url.path}: {exc.kind.value} {exc.message}")
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        return error_response(InputError(_describe_validation_error(exc)))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": UNKNOWN_ENDPOINT})
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(exc)
