"""
repositories/factory.py
------------------------
Maps a connected storage backend to its UserRepository implementation.
"""

from db.connection import Database, PostgresDatabase, SQLiteDatabase
from repositories.postgres_user_repo import PostgresUserRepository
from repositories.sqlite_user_repo import SQLiteUserRepository
from repositories.user_repo import UserRepository


def create_user_repository(db: Database) -> UserRepository:
    """
    Build the repository matching the backend's storage technology.

    Raises:
        TypeError: If ``db`` is not a known backend.
    """
    if isinstance(db, SQLiteDatabase):
        return SQLiteUserRepository(db)
    if isinstance(db, PostgresDatabase):
        return PostgresUserRepository(db)
    raise TypeError(f"Unsupported storage backend: {type(db).__name__}")
