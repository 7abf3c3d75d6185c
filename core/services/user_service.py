# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user CRUD operations against the in-memory store.
# Separates HTTP concerns from validation and mutation logic.
# =============================================================================

import logging
import re
from collections.abc import Mapping
from typing import Any

from app.exceptions import UserNotFoundError
from core.models.user import User
from core.services.user_store import UserStore
from core.validation import validate_user

logger = logging.getLogger(__name__)

# Optional sign, then hex digits after 0x or ASCII decimal digits;
# anything after the digits is ignored
_HEX_INT = re.compile(r"\s*([+-]?)0[xX]([0-9a-fA-F]*)")
_DEC_INT = re.compile(r"\s*([+-]?)([0-9]+)")


def parse_user_id(raw: str | int) -> int | None:
    """
    Parse a path segment into a user id.

    Lenient like a leading-integer parser: "2" and "2abc" both give 2,
    "0x2" is read as hex and also gives 2. A segment without leading
    ASCII digits, or a bare "0x", gives None.
    """
    if isinstance(raw, int):
        return raw

    match = _HEX_INT.match(raw)
    if match:
        if not match.group(2):
            return None
        value = int(match.group(2), 16)
    else:
        match = _DEC_INT.match(raw)
        if not match:
            return None
        value = int(match.group(2))

    return -value if match.group(1) == "-" else value


class UserService:
    """
    Service for user management operations.

    Provides a clean interface between API routes and the store.
    Every operation is atomic with respect to other writers.
    """

    def __init__(self, store: UserStore):
        self.store = store

    def list_users(self) -> list[User]:
        """Return the full collection in insertion order."""
        return self.store.all()

    def get_user(self, user_id: str | int) -> User:
        """
        Get a user by ID.

        Args:
            user_id: Raw id from the request path

        Returns:
            The matching user

        Raises:
            UserNotFoundError: If no user has this id
        """
        parsed = parse_user_id(user_id)
        user = self.store.find_by_id(parsed) if parsed is not None else None

        if user is None:
            raise UserNotFoundError(user_id)

        return user

    def create_user(self, body: Mapping[str, Any]) -> User:
        """
        Validate a request body and append a new user.

        Args:
            body: Parsed request body

        Returns:
            The created user, with its newly assigned id

        Raises:
            UserValidationError: If the name fails validation
        """
        payload = validate_user(body)

        with self.store.lock:
            user = User(id=self.store.next_id(), name=payload.name)
            self.store.append(user)

        logger.info(f"Created user: {user.id}")
        return user

    def update_user(self, user_id: str | int, body: Mapping[str, Any]) -> User:
        """
        Replace the name of an existing user.

        The id is checked before the body, so an unknown id wins over an
        invalid name.

        Raises:
            UserNotFoundError: If no user has this id
            UserValidationError: If the name fails validation
        """
        with self.store.lock:
            user = self.get_user(user_id)
            payload = validate_user(body)
            user.name = payload.name

        logger.info(f"Updated user: {user.id}")
        return user

    def delete_user(self, user_id: str | int) -> list[User]:
        """
        Remove a user.

        Returns:
            The full collection after removal

        Raises:
            UserNotFoundError: If no user has this id
        """
        with self.store.lock:
            user = self.get_user(user_id)
            self.store.remove_at(self.store.index_of(user))
            remaining = self.store.all()

        logger.info(f"Deleted user: {user.id}")
        return remaining
