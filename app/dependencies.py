# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The store is created by the application factory and kept on app.state,
# so every app instance (and every test client) has its own collection.
# =============================================================================

import json
import logging
from typing import Annotated, Any

from fastapi import Depends, Request

from app.exceptions import MalformedBodyError
from core.services.user_service import UserService
from core.services.user_store import UserStore

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def get_user_store(request: Request) -> UserStore:
    """Get the store owned by the running application."""
    return request.app.state.user_store


def get_user_service(
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UserService:
    """Build a service bound to the application's store."""
    return UserService(store)


async def get_request_body(request: Request) -> dict[str, Any]:
    """
    Parse the request body into a dict.

    - application/json: parsed as JSON; a non-object value counts as empty
    - application/x-www-form-urlencoded: parsed as form fields
    - anything else: empty

    Raises:
        MalformedBodyError: If a JSON body cannot be decoded
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type == FORM_CONTENT_TYPE:
        form = await request.form()
        return dict(form)

    if content_type == "application/json" or content_type.endswith("+json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.debug(f"Rejected malformed JSON body: {e}")
            raise MalformedBodyError(str(e)) from e
        return data if isinstance(data, dict) else {}

    return {}


# Type aliases for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
RequestBodyDep = Annotated[dict[str, Any], Depends(get_request_body)]
