"""
main.py
-------
Demonstration entry point for the user store.

Runs a fixed sequence against the configured storage location: create one
user, fetch it, list all users, update it, delete it. Any error is fatal.
"""

import sys

from config import DATABASE_LOCATION
from db.connection import open_database
from repositories.factory import create_user_repository
from services.user_service import UserService
from utils.logger import get_logger

logger = get_logger(__name__)


def run_demo(service: UserService) -> None:
    """Exercise every service operation once, printing the users read back."""
    service.create_user("John Doe", "john@example.com")

    user = service.get_user(1)
    print(user)

    for user in service.get_all_users():
        print(user)

    service.update_user(1, "John Smith", "john.smith@example.com")
    service.delete_user(1)


def main(location: str = DATABASE_LOCATION) -> None:
    """Open the store, run the demo, and exit with status 1 on any error."""
    db = None
    try:
        db = open_database(location)
        run_demo(UserService(create_user_repository(db)))
    except Exception as e:
        logger.critical(f"Fatal: {e}")
        sys.exit(1)
    finally:
        if db is not None:
            db.close()


if __name__ == "__main__":
    main()
