"""Centralized exception handlers for the FastAPI application.

Domain and auth exceptions are mapped to HTTP responses with one error
format. Expected business outcomes keep their stable message. Integrity
failures (undecryptable envelopes, malformed password hashes) are logged
with full context and answered with an opaque 500.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from piiguard.domain.security import SecurityDomainError
from piiguard.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)
from piiguard_auth import (
    AuthError,
    InvalidCredentialsError,
    InvalidHashFormatError,
    InvalidTokenError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

AUTH_ERROR_TO_CODE: dict[type[AuthError], ErrorCode] = {
    InvalidCredentialsError: ErrorCode.INVALID_CREDENTIALS,
    InvalidTokenError: ErrorCode.INVALID_TOKEN,
    WeakPasswordError: ErrorCode.WEAK_PASSWORD,
}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception."""
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": message,
            "code": code,
        },
    )


def _internal_error_response() -> JSONResponse:
    return _create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=INTERNAL_ERROR_MESSAGE,
        code=ErrorCode.INTERNAL_ERROR.value,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle domain exceptions with their stable message."""
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle auth exceptions.

        A malformed stored password hash is a storage fault, not a
        login failure, and is reported as an internal error.
        """
        if isinstance(exc, InvalidHashFormatError):
            logger.error(
                "Corrupted password hash on %s %s",
                request.method,
                request.url.path,
                exc_info=exc,
            )
            return _internal_error_response()

        code = AUTH_ERROR_TO_CODE.get(type(exc), ErrorCode.INVALID_CREDENTIALS)
        logger.info(
            "Auth error on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )

        status_code = ERROR_CODE_TO_STATUS[code]
        response = _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=code.value,
        )
        if status_code == status.HTTP_401_UNAUTHORIZED:
            response.headers["WWW-Authenticate"] = "Bearer"
        return response

    @app.exception_handler(SecurityDomainError)
    async def security_exception_handler(
        request: Request,
        exc: SecurityDomainError,
    ) -> JSONResponse:
        """Handle encryption and decryption failures.

        These indicate corrupted storage or a key mismatch. Details are
        logged, the client only sees a generic 500.
        """
        logger.error(
            "Field encryption failure on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return _internal_error_response()

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _internal_error_response()
