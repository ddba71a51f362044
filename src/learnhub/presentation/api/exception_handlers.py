"""Translate domain exceptions into JSON error responses.

Every error leaves the API as ``{"detail": <message>, "code": <ErrorCode>}``.
The status comes from the error code when it has a dedicated entry and
from the exception's base class otherwise.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from learnhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CONTENT_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONTENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_TITLE: status.HTTP_409_CONFLICT,
    ErrorCode.INACTIVE_CREATOR: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Checked in order when a code has no entry above
_STATUS_BY_BASE_CLASS: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception."""
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    for base, status_code in _STATUS_BY_BASE_CLASS:
        if isinstance(exc, base):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def error_body(message: str, code: ErrorCode) -> dict[str, str]:
    return {"detail": message, "code": code.value}


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the domain and catch-all handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = status_for(exc)
        logger.warning(
            "%s %s -> %d %s: %s %s",
            request.method,
            request.url.path,
            status_code,
            exc.code.value,
            exc.message,
            exc.details,
        )
        return JSONResponse(
            status_code=status_code,
            content=error_body(exc.message, exc.code),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "%s %s failed with an unexpected error",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("An internal error occurred", ErrorCode.INTERNAL_ERROR),
        )
