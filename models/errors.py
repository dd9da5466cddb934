"""
models/errors.py
----------------
Error taxonomy for the user store.

Backends and repositories translate native driver errors (sqlite3, psycopg2)
into these types and chain the original with ``raise ... from``. The service
layer and the entry point let them propagate unchanged.
"""


class StorageError(Exception):
    """Base class for every error raised by the user store."""


class InitializationError(StorageError):
    """The storage location could not be opened or its schema created."""


class NotFound(StorageError):
    """No user row exists for the requested identifier."""

    def __init__(self, user_id: int):
        super().__init__(f"User #{user_id} not found")
        self.user_id = user_id


class WriteError(StorageError):
    """An insert, update or delete statement failed at the backend."""
