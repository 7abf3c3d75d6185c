# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record and request payload schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    NAME_MIN_LENGTH,
    User,
    UserPayload,
)

__all__ = [
    "NAME_MIN_LENGTH",
    "User",
    "UserPayload",
]
