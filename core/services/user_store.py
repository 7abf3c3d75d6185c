# =============================================================================
# core/services/user_store.py - In-Memory User Store
# =============================================================================
# Holds the ordered collection of user records for the life of the process.
# Nothing is persisted; every application instance starts from the seed.
#
# Ids come from a monotonic counter that starts after the highest seeded
# id, so an id is never handed out twice, even after deletions.
# =============================================================================

import logging
import threading
from collections.abc import Iterable

from core.models.user import User

logger = logging.getLogger(__name__)

# Records every store is seeded with on startup
SEED_USERS: tuple[tuple[int, str], ...] = (
    (1, "Intza"),
    (2, "Alex"),
    (3, "María"),
)


class UserStore:
    """
    Ordered, in-memory sequence of User records.

    Multi-step mutations (find then modify, reserve id then append) must
    hold `lock` so two writers cannot interleave.
    """

    def __init__(self, users: Iterable[User] = ()):
        self._users: list[User] = list(users)
        self._next_id = max((u.id for u in self._users), default=0) + 1
        self.lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "UserStore":
        """Create a store holding the fixed seed records."""
        store = cls(User(id=user_id, name=name) for user_id, name in SEED_USERS)
        logger.debug(f"Seeded user store with {len(store)} records")
        return store

    def __len__(self) -> int:
        return len(self._users)

    def all(self) -> list[User]:
        """Snapshot of every record, in insertion order."""
        with self.lock:
            return list(self._users)

    def find_by_id(self, user_id: int) -> User | None:
        """
        Linear scan for a record by id.

        Returns:
            The first record with a matching id, or None
        """
        with self.lock:
            for user in self._users:
                if user.id == user_id:
                    return user
        return None

    def index_of(self, user: User) -> int:
        """Position of a stored record (by identity)."""
        with self.lock:
            for index, stored in enumerate(self._users):
                if stored is user:
                    return index
        raise ValueError(f"User {user.id} is not in the store")

    def next_id(self) -> int:
        """Reserve and return the next unused id."""
        with self.lock:
            user_id = self._next_id
            self._next_id += 1
            return user_id

    def append(self, user: User) -> None:
        with self.lock:
            self._users.append(user)
            if user.id >= self._next_id:
                self._next_id = user.id + 1

    def remove_at(self, index: int) -> User:
        with self.lock:
            return self._users.pop(index)
