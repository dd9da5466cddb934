import sqlite3

import pytest

from db.connection import SQLiteDatabase, is_postgres_location, open_database
from models.errors import InitializationError, WriteError
from models.user import User
from repositories.sqlite_user_repo import SQLiteUserRepository


def _columns(db_path):
    conn = sqlite3.connect(db_path)
    try:
        return [(r[1], r[2], r[5]) for r in conn.execute("PRAGMA table_info(users)")]
    finally:
        conn.close()


def test_open_creates_users_table(sqlite_db, db_path):
    assert isinstance(sqlite_db, SQLiteDatabase)
    assert _columns(db_path) == [
        ("id", "INTEGER", 1),
        ("name", "TEXT", 0),
        ("email", "TEXT", 0),
    ]


def test_open_is_idempotent_and_keeps_rows(db_path):
    db = open_database(db_path)
    SQLiteUserRepository(db).save(User(name="Ada", email="ada@example.com"))
    db.close()

    db = open_database(db_path)
    try:
        users = SQLiteUserRepository(db).get_all()
    finally:
        db.close()
    assert [(u.id, u.name, u.email) for u in users] == [(1, "Ada", "ada@example.com")]


def test_open_in_memory_location():
    db = open_database(":memory:")
    try:
        assert SQLiteUserRepository(db).get_all() == []
    finally:
        db.close()


def test_open_missing_directory_raises_initialization_error(tmp_path):
    with pytest.raises(InitializationError) as exc:
        open_database(str(tmp_path / "missing" / "users.db"))
    assert isinstance(exc.value.__cause__, sqlite3.Error)


def test_open_non_database_file_raises_initialization_error(tmp_path):
    path = tmp_path / "not_a_db.db"
    path.write_text("this is plain text, not a sqlite file " * 100, encoding="utf-8")
    with pytest.raises(InitializationError):
        open_database(str(path))


def test_ids_are_not_reused_after_delete(sqlite_db):
    repo = SQLiteUserRepository(sqlite_db)
    first = repo.save(User(name="a", email="a@x"))
    repo.delete(first.id)
    second = repo.save(User(name="b", email="b@x"))
    assert second.id > first.id


def test_save_on_closed_database_raises_write_error(sqlite_db):
    repo = SQLiteUserRepository(sqlite_db)
    sqlite_db.close()
    with pytest.raises(WriteError):
        repo.save(User(name="late", email="late@example.com"))


def test_update_and_delete_on_closed_database_raise_write_error(sqlite_db):
    repo = SQLiteUserRepository(sqlite_db)
    user = repo.save(User(name="a", email="a@x"))
    sqlite_db.close()
    with pytest.raises(WriteError):
        repo.update(user)
    with pytest.raises(WriteError):
        repo.delete(user.id)


def test_close_is_idempotent(sqlite_db):
    sqlite_db.close()
    sqlite_db.close()


@pytest.mark.parametrize(
    "location, expected",
    [
        ("postgresql://u:p@localhost/users", True),
        ("postgres://localhost/users", True),
        ("users.db", False),
        (":memory:", False),
    ],
)
def test_is_postgres_location(location, expected):
    assert is_postgres_location(location) is expected
