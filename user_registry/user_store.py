from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from user_registry.errors import UserNotFoundError
from user_registry.models import SEED_USERS, User
from user_registry.rwlock import ReadWriteLock

logger = logging.getLogger("user_registry.store")


class InMemoryUserStore:
    """Thread-safe in-memory user registry.

    Storage semantics:
    - Stored only in the API process memory (cleared on restart).
    - Not shared across multiple API instances.
    - Keyed by ``User.id``; writing a record with an existing id replaces it.

    Reads (``list``/``get``/``count``) hold the lock in shared mode, writes
    (``upsert``/``delete``) in exclusive mode, each only for the map access
    itself. The lock is private: callers only ever see whole operations.
    """

    def __init__(self, users: Iterable[User] = ()):
        self._lock = ReadWriteLock()
        self._users: Dict[str, User] = {u.id: u for u in users}

    @classmethod
    def seeded(cls) -> "InMemoryUserStore":
        return cls(SEED_USERS)

    def list(self) -> List[User]:
        with self._lock.read_locked():
            return list(self._users.values())

    def count(self) -> int:
        with self._lock.read_locked():
            return len(self._users)

    def get(self, user_id: str) -> User:
        with self._lock.read_locked():
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def upsert(self, user: User) -> User:
        with self._lock.write_locked():
            replaced = user.id in self._users
            self._users[user.id] = user
        logger.debug("Stored user %r (replaced=%s)", user.id, replaced)
        return user

    def delete(self, user_id: str) -> User:
        """Remove ``user_id`` and return the record seen before removal.

        The existence check and the removal are separate critical sections.
        Another writer may remove the id in between; the removal is then a
        no-op and the record observed by the check is still returned.
        """
        user = self.get(user_id)
        with self._lock.write_locked():
            self._users.pop(user_id, None)
        logger.debug("Deleted user %r", user_id)
        return user
