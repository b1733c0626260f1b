"""
Two-tier error taxonomy.

Private errors are internal failures (database, driver). They go to the
error sink and the caller only sees a generic 500. Public errors carry a
status code and message that are returned to the caller as-is, wrapped in
``{"error": {"code": ..., "message": ...}}``.
"""
from enum import IntEnum
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class ErrorType(IntEnum):
    """Error classification: private (0) or public (1)."""
    PRIVATE = 0
    PUBLIC = 1


INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Base class for errors raised while serving a request."""

    type: ErrorType = ErrorType.PRIVATE

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class InternalError(ApiError):
    """Private error wrapping an unexpected failure."""

    type = ErrorType.PRIVATE

    def __init__(self, cause: BaseException, message: Optional[str] = None):
        super().__init__(500, message or str(cause))
        self.cause = cause


class PublicError(ApiError):
    """Error whose code and message are shown to the caller."""

    type = ErrorType.PUBLIC


class NotFoundError(PublicError):
    def __init__(self, message: str):
        super().__init__(404, message)


def create_error(typ: ErrorType, code: int, message: str) -> ApiError:
    """Create an error of the given type with its fields filled."""
    if typ == ErrorType.PUBLIC:
        return PublicError(code, message)
    if typ == ErrorType.PRIVATE:
        return InternalError(RuntimeError(message), message)
    raise ValueError("Error type needs to be either ErrorType.PRIVATE or ErrorType.PUBLIC")


def error_envelope(code: int, message: str) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message}}


def log_private_error(sink, typ: ErrorType, err: BaseException) -> None:
    """Send a private error to the monitoring sink."""
    if typ != ErrorType.PRIVATE:
        raise ValueError("Error type needs to be ErrorType.PRIVATE for private error logging")
    sink.capture(err)


def log_public_error(typ: ErrorType, code: int, message: str) -> JSONResponse:
    """Build the error response returned to the caller."""
    if typ != ErrorType.PUBLIC:
        raise ValueError("Error type needs to be ErrorType.PUBLIC for public error logging")
    return JSONResponse(status_code=code, content=error_envelope(code, message))
