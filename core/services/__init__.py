# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_store import SEED_USERS, UserStore
from .user_service import UserService, parse_user_id

__all__ = [
    "SEED_USERS",
    "UserStore",
    "UserService",
    "parse_user_id",
]
