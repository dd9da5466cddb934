import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from db.connection import open_database  # noqa: E402
from repositories.memory_user_repo import InMemoryUserRepository  # noqa: E402
from repositories.sqlite_user_repo import SQLiteUserRepository  # noqa: E402
from services.user_service import UserService  # noqa: E402


@pytest.fixture()
def db_path(tmp_path):
    return str(tmp_path / "users_test.db")


@pytest.fixture()
def sqlite_db(db_path):
    db = open_database(db_path)
    yield db
    db.close()


@pytest.fixture(params=["sqlite", "memory"])
def repo(request):
    """Each repository test runs against both implementations."""
    if request.param == "memory":
        return InMemoryUserRepository()
    return SQLiteUserRepository(request.getfixturevalue("sqlite_db"))


@pytest.fixture()
def service(repo):
    return UserService(repo)
