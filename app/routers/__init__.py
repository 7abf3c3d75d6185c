# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - users.py: User CRUD endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import users

__all__ = [
    "users",
]
