"""
repositories/postgres_user_repo.py
-----------------------------------
UserRepository backed by PostgreSQL through psycopg2.
"""

import psycopg2

from db.connection import PostgresDatabase
from models.errors import NotFound, WriteError
from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class PostgresUserRepository(UserRepository):
    """Repository for CRUD operations on the PostgreSQL users table."""

    def __init__(self, db: PostgresDatabase):
        self.db = db

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, user_id: int) -> User:
        sql = "SELECT id, name, email FROM users WHERE id = %s;"
        with self.db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
        if row is None:
            raise NotFound(user_id)
        return self._row_to_user(row)

    def get_all(self) -> list[User]:
        sql = "SELECT id, name, email FROM users ORDER BY id;"
        with self.db.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_user(r) for r in cur.fetchall()]

    # ── CREATE ────────────────────────────────────────────

    def save(self, user: User) -> User:
        """
        Insert the user and read the SERIAL id back in the same statement.
        """
        sql = "INSERT INTO users (name, email) VALUES (%s, %s) RETURNING id;"
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (user.name, user.email))
                    row = cur.fetchone()
        except psycopg2.Error as e:
            logger.error(f"Failed to save user '{user.name}': {e}")
            raise WriteError(f"Cannot insert user: {e}") from e
        user.id = row[0]
        logger.info(f"Saved user #{user.id}")
        return user

    # ── UPDATE ────────────────────────────────────────────

    def update(self, user: User) -> None:
        sql = "UPDATE users SET name = %s, email = %s WHERE id = %s;"
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (user.name, user.email, user.id))
                    updated = cur.rowcount > 0
        except psycopg2.Error as e:
            logger.error(f"Failed to update user #{user.id}: {e}")
            raise WriteError(f"Cannot update user #{user.id}: {e}") from e
        if updated:
            logger.info(f"Updated user #{user.id}")

    # ── DELETE ────────────────────────────────────────────

    def delete(self, user_id: int) -> None:
        sql = "DELETE FROM users WHERE id = %s;"
        try:
            with self.db.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(sql, (user_id,))
                    deleted = cur.rowcount > 0
        except psycopg2.Error as e:
            logger.error(f"Failed to delete user #{user_id}: {e}")
            raise WriteError(f"Cannot delete user #{user_id}: {e}") from e
        if deleted:
            logger.info(f"Deleted user #{user_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a database row tuple to a User domain object."""
        return User(id=row[0], name=row[1], email=row[2])
