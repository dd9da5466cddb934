"""
db/init_db.py
-------------
Creates the users table if it does not already exist.
Run this module directly to initialize the configured location:
    python -m db.init_db
"""

import sqlite3

import psycopg2

from models.errors import InitializationError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = {
    "sqlite": """
        CREATE TABLE IF NOT EXISTS users (
            id      INTEGER PRIMARY KEY AUTOINCREMENT,
            name    TEXT,
            email   TEXT
        )
    """,
    "postgresql": """
        CREATE TABLE IF NOT EXISTS users (
            id      SERIAL PRIMARY KEY,
            name    TEXT,
            email   TEXT
        )
    """,
}


def create_tables(db) -> None:
    """
    Execute the schema SQL for the backend's dialect.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        db: A connected SQLiteDatabase or PostgresDatabase.

    Raises:
        InitializationError: If the schema cannot be created.
    """
    sql = SCHEMA_SQL[db.dialect]
    try:
        with db.connection() as conn:
            cur = conn.cursor()
            try:
                cur.execute(sql)
            finally:
                cur.close()
    except (sqlite3.Error, psycopg2.Error) as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise InitializationError(f"Cannot create schema: {e}") from e
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from config import DATABASE_LOCATION
    from db.connection import open_database

    open_database(DATABASE_LOCATION).close()
    print("✅ Database schema created successfully.")
