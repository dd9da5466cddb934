"""
db/connection.py
----------------
Storage backends for the user store.

Two backends share one small surface (``connect``, ``close``, ``connection``,
``dialect``):

    - SQLiteDatabase: one shared connection in autocommit mode; a lock
      serializes statement execution across threads.
    - PostgresDatabase: a psycopg2 SimpleConnectionPool; every borrowed
      connection is committed on success and rolled back on failure.

``open_database()`` picks the backend from the location string, connects and
ensures the schema exists.
"""

import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Union

import psycopg2
from psycopg2 import pool

from db.init_db import create_tables
from models.errors import InitializationError
from utils.logger import get_logger

logger = get_logger(__name__)

_POSTGRES_PREFIXES = ("postgresql://", "postgres://")


class SQLiteDatabase:
    """A SQLite file (or ``:memory:``) shared by every caller in the process."""

    dialect = "sqlite"

    def __init__(self, path: str):
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    def connect(self) -> None:
        """
        Open (or create) the database file.

        Raises:
            InitializationError: If the file cannot be opened.
        """
        if self._conn is not None:
            return
        try:
            self._conn = sqlite3.connect(
                self.path,
                check_same_thread=False,
                isolation_level=None,
            )
        except sqlite3.Error as e:
            logger.error(f"Failed to open SQLite database {self.path}: {e}")
            raise InitializationError(f"Cannot open {self.path}: {e}") from e
        self._conn.row_factory = sqlite3.Row
        logger.info(f"SQLite database opened: {self.path}")

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """
        Lend the shared connection for a single statement.

        Raises:
            sqlite3.ProgrammingError: If the database has been closed.
        """
        with self._lock:
            if self._conn is None:
                raise sqlite3.ProgrammingError("Cannot operate on a closed database.")
            yield self._conn

    def close(self) -> None:
        """Close the shared connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info(f"SQLite database closed: {self.path}")


class PostgresDatabase:
    """A PostgreSQL server reached through a small connection pool."""

    dialect = "postgresql"

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: Optional[pool.SimpleConnectionPool] = None

    def connect(self) -> None:
        """
        Initialize the connection pool.

        Raises:
            InitializationError: If the server is unreachable or rejects the DSN.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.SimpleConnectionPool(self.min_conn, self.max_conn, self.dsn)
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise InitializationError(f"Cannot connect to PostgreSQL: {e}") from e
        logger.info("Database connection pool initialized successfully.")

    @contextmanager
    def connection(self) -> Iterator["psycopg2.extensions.connection"]:
        """
        Borrow a pooled connection for a single statement.

        The connection is committed if the block succeeds, rolled back if it
        raises, and returned to the pool either way.

        Raises:
            psycopg2.pool.PoolError: If the pool has been closed.
        """
        if self._pool is None:
            raise pool.PoolError("connection pool is closed")
        conn = self._pool.getconn()
        try:
            yield conn
            conn.commit()
        except Exception:
            if not conn.closed:
                conn.rollback()
            raise
        finally:
            self._pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")


Database = Union[SQLiteDatabase, PostgresDatabase]


def is_postgres_location(location: str) -> bool:
    """Returns True if ``location`` is a PostgreSQL connection string."""
    return location.startswith(_POSTGRES_PREFIXES)


def open_database(location: str) -> Database:
    """
    Open the storage location and make sure the users table exists.

    Safe to call against an already-initialized location.

    Args:
        location: A SQLite file path (or ``:memory:``), or a
            ``postgresql://`` connection string.

    Returns:
        A connected SQLiteDatabase or PostgresDatabase.

    Raises:
        InitializationError: If the location cannot be opened or the schema
            cannot be created.
    """
    if is_postgres_location(location):
        db: Database = PostgresDatabase(location)
    else:
        db = SQLiteDatabase(location)
    db.connect()
    try:
        create_tables(db)
    except InitializationError:
        db.close()
        raise
    return db
