# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: A stored record, returned to clients
# - UserPayload: The validated body of a create/update request
#
# On the wire the name field is called "nombre". Python code uses `name`
# and pydantic maps between the two through the field alias.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field

# Minimum number of characters a user name must have
NAME_MIN_LENGTH = 3


class User(BaseModel):
    """
    A user record held in the store.

    Example:
        {
            "id": 4,
            "nombre": "Leo"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    # Unique identifier, assigned by the store on creation
    id: int = Field(
        ...,
        ge=1,
        description="Unique user identifier"
    )

    name: str = Field(
        ...,
        alias="nombre",
        description="Display name of the user"
    )


class UserPayload(BaseModel):
    """
    Schema for the body of POST and PUT requests.

    Only `nombre` is read; any other keys in the body are ignored.

    Example:
        {
            "nombre": "Leo"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(
        ...,
        alias="nombre",
        min_length=NAME_MIN_LENGTH,
        description="New user name (at least 3 characters)"
    )
