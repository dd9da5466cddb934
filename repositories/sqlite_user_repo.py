"""
repositories/sqlite_user_repo.py
---------------------------------
UserRepository backed by a SQLite file.
"""

import sqlite3

from db.connection import SQLiteDatabase
from models.errors import NotFound, WriteError
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class SQLiteUserRepository(UserRepository):
    """Repository for CRUD operations on the SQLite users table."""

    def __init__(self, db: SQLiteDatabase):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, user_id: int) -> User:
        sql = "SELECT id, name, email FROM users WHERE id = ?;"
        with self.db.connection() as conn:
            row = conn.execute(sql, (user_id,)).fetchone()
        if row is None:
            raise NotFound(user_id)
        return self._row_to_user(row)

    def get_all(self) -> list[User]:
        sql = "SELECT id, name, email FROM users ORDER BY id;"
        with self.db.connection() as conn:
            rows = conn.execute(sql).fetchall()
        return [self._row_to_user(r) for r in rows]

    # ── CREATE ────────────────────────────────────────────

    def save(self, user: User) -> User:
        sql = "INSERT INTO users (name, email) VALUES (?, ?);"
        try:
            with self.db.connection() as conn:
                cur = conn.execute(sql, (user.name, user.email))
        except sqlite3.Error as e:
            logger.error(f"Failed to save user '{user.name}': {e}")
            raise WriteError(f"Cannot insert user: {e}") from e
        user.id = cur.lastrowid
        logger.info(f"Saved user #{user.id}")
        return user

    # ── UPDATE ────────────────────────────────────────────

    def update(self, user: User) -> None:
        sql = "UPDATE users SET name = ?, email = ? WHERE id = ?;"
        try:
            with self.db.connection() as conn:
                cur = conn.execute(sql, (user.name, user.email, user.id))
        except sqlite3.Error as e:
            logger.error(f"Failed to update user #{user.id}: {e}")
            raise WriteError(f"Cannot update user #{user.id}: {e}") from e
        if cur.rowcount > 0:
            logger.info(f"Updated user #{user.id}")

    # ── DELETE ────────────────────────────────────────────

    def delete(self, user_id: int) -> None:
        sql = "DELETE FROM users WHERE id = ?;"
        try:
            with self.db.connection() as conn:
                cur = conn.execute(sql, (user_id,))
        except sqlite3.Error as e:
            logger.error(f"Failed to delete user #{user_id}: {e}")
            raise WriteError(f"Cannot delete user #{user_id}: {e}") from e
        if cur.rowcount > 0:
            logger.info(f"Deleted user #{user_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        """Convert a sqlite3.Row to a User domain object."""
        return User(id=row["id"], name=row["name"], email=row["email"])
