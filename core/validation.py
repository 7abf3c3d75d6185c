# =============================================================================
# core/validation.py - User Payload Validation
# =============================================================================
# Checks a request body against the UserPayload schema before the store is
# touched. Pydantic does the checking; this module turns its first error
# into the short message returned to the client.
#
# Usage:
#   payload = validate_user({"nombre": "Leo"})
#   payload.name  # "Leo"
# =============================================================================

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.exceptions import UserValidationError
from core.models.user import NAME_MIN_LENGTH, UserPayload

NAME_FIELD = "nombre"


def _describe(error: dict[str, Any]) -> str:
    """Render one pydantic error as a client-facing message."""
    field = NAME_FIELD
    if error.get("loc"):
        field = str(error["loc"][-1])

    error_type = error.get("type")
    if error_type == "missing":
        return f'"{field}" is required'
    if error_type == "string_type":
        return f'"{field}" must be a string'
    if error_type == "string_too_short":
        if error.get("input") == "":
            return f'"{field}" is not allowed to be empty'
        min_length = error.get("ctx", {}).get("min_length", NAME_MIN_LENGTH)
        return f'"{field}" length must be at least {min_length} characters long'
    return f'"{field}" {error.get("msg", "is invalid")}'


def validate_user(body: Mapping[str, Any]) -> UserPayload:
    """
    Validate the name submitted in a request body.

    Only the "nombre" key is considered; the rest of the body is ignored.
    A body without the key counts as an absent name.

    Args:
        body: Parsed request body (JSON object or form fields)

    Returns:
        The validated payload

    Raises:
        UserValidationError: With the message of the first failed rule
    """
    candidate = {NAME_FIELD: body[NAME_FIELD]} if NAME_FIELD in body else {}

    try:
        return UserPayload.model_validate(candidate)
    except ValidationError as e:
        errors = e.errors()
        raise UserValidationError(_describe(errors[0])) from e
