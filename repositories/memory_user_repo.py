"""
repositories/memory_user_repo.py
---------------------------------
UserRepository kept in a dict. Used by tests and anywhere a throwaway store
is enough; behaves like the SQL repositories, including the silent no-op on
update/delete of a missing id.
"""

import threading
from dataclasses import replace

from models.errors import NotFound
from models.user import User
from repositories.user_repo import UserRepository


class InMemoryUserRepository(UserRepository):
    """Stores copies of users keyed by an auto-incrementing id."""

    def __init__(self):
        self._rows: dict[int, User] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def get_by_id(self, user_id: int) -> User:
        with self._lock:
            row = self._rows.get(user_id)
        if row is None:
            raise NotFound(user_id)
        return replace(row)

    def get_all(self) -> list[User]:
        with self._lock:
            return [replace(self._rows[i]) for i in sorted(self._rows)]

    def save(self, user: User) -> User:
        with self._lock:
            # ids are never reused, even after a delete
            self._last_id += 1
            user.id = self._last_id
            self._rows[user.id] = replace(user)
        return user

    def update(self, user: User) -> None:
        with self._lock:
            if user.id in self._rows:
                self._rows[user.id] = replace(user)

    def delete(self, user_id: int) -> None:
        with self._lock:
            self._rows.pop(user_id, None)
