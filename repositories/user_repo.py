"""
repositories/user_repo.py
--------------------------
The repository interface for user records.

Services depend only on this class, so a storage technology can be swapped
(SQLite, PostgreSQL, in-memory) without touching them.
"""

from abc import ABC, abstractmethod

from models.user import User


class UserRepository(ABC):
    """CRUD operations on the users table, one statement per call."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> User:
        """
        Fetch a single user.

        Raises:
            NotFound: If no row has this id.
        """

    @abstractmethod
    def get_all(self) -> list[User]:
        """Fetch every user ordered by id. Empty list when the table is empty."""

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Insert a new row from ``user.name`` and ``user.email``.

        Any id already set on ``user`` is ignored. The id generated by storage
        is written back onto ``user``, which is also returned.

        Raises:
            WriteError: If the insert fails.
        """

    @abstractmethod
    def update(self, user: User) -> None:
        """
        Overwrite name and email of the row matching ``user.id``.
        Does nothing when no row matches.

        Raises:
            WriteError: If the update fails.
        """

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """
        Delete the row matching ``user_id``. Does nothing when no row matches.

        Raises:
            WriteError: If the delete fails.
        """
