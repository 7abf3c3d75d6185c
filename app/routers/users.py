# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Handles listing, reading, creating, renaming and deleting users.
# Failures are raised as UsuariosException subclasses and rendered as
# plain text by the handlers registered in main.py.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import RequestBodyDep, UserServiceDep
from core.models.user import User, UserPayload

router = APIRouter()

# The id stays a string so a non-numeric id is a 404 rather than a 422
UserIdPath = Annotated[str, Path(description="User id", examples=["1"])]

# The body is read by get_request_body, so describe it for the docs by hand
_payload_schema = UserPayload.model_json_schema(by_alias=True)
USER_BODY_DOCS = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": _payload_schema},
            "application/x-www-form-urlencoded": {"schema": _payload_schema},
        },
    }
}


# =============================================================================
# Endpoints
# =============================================================================
# Each route is also registered with a trailing slash: the static mount at
# "/" answers unmatched paths, so redirect_slashes never gets a chance.

@router.get("", response_model=list[User])
@router.get("/", response_model=list[User], include_in_schema=False)
async def list_users(service: UserServiceDep):
    """
    List all users.

    Returns the full collection in insertion order.
    """
    return service.list_users()


@router.get("/{user_id}", response_model=User)
@router.get("/{user_id}/", response_model=User, include_in_schema=False)
async def get_user(user_id: UserIdPath, service: UserServiceDep):
    """
    Get a user by id.

    Returns 404 if no user has this id.
    """
    return service.get_user(user_id)


@router.post("", response_model=User, openapi_extra=USER_BODY_DOCS)
@router.post("/", response_model=User, include_in_schema=False)
async def create_user(body: RequestBodyDep, service: UserServiceDep):
    """
    Create a new user.

    Accepts a JSON or form-encoded body with a "nombre" of at least
    3 characters. The new user gets the next free id.
    """
    return service.create_user(body)


@router.put("/{user_id}", response_model=User, openapi_extra=USER_BODY_DOCS)
@router.put("/{user_id}/", response_model=User, include_in_schema=False)
async def update_user(user_id: UserIdPath, body: RequestBodyDep, service: UserServiceDep):
    """
    Rename an existing user.

    Returns 404 if the id is unknown, 400 if the new name is invalid.
    """
    return service.update_user(user_id, body)


@router.delete("/{user_id}", response_model=list[User])
@router.delete("/{user_id}/", response_model=list[User], include_in_schema=False)
async def delete_user(user_id: UserIdPath, service: UserServiceDep):
    """
    Delete a user.

    Returns the remaining users.
    """
    return service.delete_user(user_id)
