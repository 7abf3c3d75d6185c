# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure ends the request with an explicit status code and a
# plain-text body; no exception escapes a route handler.
# =============================================================================

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class UsuariosException(Exception):
    """
    Base exception for the Usuarios API.

    All custom exceptions inherit from this class.
    The message is sent to the client as the response body.
    """

    def __init__(
        self,
        message: str,
        code: str = "USUARIOS_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(UsuariosException):
    """Raised when no user has the requested ID."""

    def __init__(self, user_id: str | int):
        super().__init__(
            message="El usuario no fue encontrado",
            code="USER_NOT_FOUND",
            status_code=404,
        )
        self.user_id = user_id


class UserValidationError(UsuariosException):
    """Raised when a request body fails the user schema."""

    def __init__(self, message: str, field: str = "nombre"):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
        )
        self.field = field


class MalformedBodyError(UsuariosException):
    """Raised when a JSON request body cannot be parsed."""

    def __init__(self, error: str):
        super().__init__(
            message="Malformed JSON body",
            code="MALFORMED_BODY",
            status_code=400,
        )
        self.error = error


# =============================================================================
# Exception Handlers
# =============================================================================

async def usuarios_exception_handler(
    request: Request,
    exc: UsuariosException
) -> PlainTextResponse:
    """
    Convert UsuariosException to a plain-text response.

    The body is the human-readable message, the status comes from the
    exception.
    """
    logger.debug(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> PlainTextResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return PlainTextResponse("An unexpected error occurred", status_code=500)
