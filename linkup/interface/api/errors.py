"""Exception handlers for the LinkUp API.

Domain errors are raised from use cases and turned into JSON responses
here, so routes contain no try/except. Every error body has the shape
``{"error": <reason>, "detail": <message>}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from linkup.domain.error import (
    DomainError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidOperationError,
    InvalidTokenError,
    NotFoundError,
    UnauthenticatedError,
    UploadFailedError,
)

# Checked in order; subclasses before their bases
STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (UnauthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidOperationError, status.HTTP_400_BAD_REQUEST),
    (InvalidCredentialsError, status.HTTP_400_BAD_REQUEST),
    (UploadFailedError, status.HTTP_502_BAD_GATEWAY),
]


def status_for(exc: DomainError) -> int:
    """HTTP status for a domain error (400 for unmapped ones)."""
    for error_type, code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle DomainError exceptions.

    Args:
        request: The incoming request that triggered the error.
        exc: The domain error.

    Returns:
        JSONResponse with the mapped status and the error's reason.
    """
    code = status_for(exc)
    logfire.warn(
        "Request failed",
        path=request.url.path,
        status_code=code,
        reason=exc.reason,
        error=str(exc),
    )
    headers = {"WWW-Authenticate": "Bearer"} if code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(
        status_code=code,
        content={"error": exc.reason, "detail": str(exc)},
        headers=headers,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle any unhandled exceptions.

    The client gets a generic body; the exception goes to logfire.
    """
    logfire.exception(
        "Unhandled exception", path=request.url.path, error_type=type(exc).__name__
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "InternalFailure",
            "detail": "An unexpected error occurred",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the handlers on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
