"""
services/user_service.py
-------------------------
Use-case operations on users, delegating to a UserRepository.
"""

from models.user import User
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Translates coarse-grained user operations into repository calls.

    The service is stateless apart from its repository; every call is
    independent, and errors (NotFound, WriteError) reach the caller unchanged.
    """

    def __init__(self, repository: UserRepository):
        self.repo = repository

    def get_user(self, user_id: int) -> User:
        """Fetch one user. Raises NotFound if the id does not exist."""
        return self.repo.get_by_id(user_id)

    def get_all_users(self) -> list[User]:
        return self.repo.get_all()

    def create_user(self, name: str, email: str) -> None:
        """
        Store a new user.

        The generated id is not returned; callers that need it look the user
        up through get_all_users().
        """
        self.repo.save(User(name=name, email=email))

    def update_user(self, user_id: int, name: str, email: str) -> None:
        """
        Replace the name and email of an existing user.

        Unlike UserRepository.update, this reads the row first and therefore
        raises NotFound for an unknown id. The read and the write are separate
        statements and are not isolated from concurrent deletes.
        """
        user = self.repo.get_by_id(user_id)
        user.name = name
        user.email = email
        self.repo.update(user)

    def delete_user(self, user_id: int) -> None:
        """Delete a user. Unknown ids are ignored."""
        self.repo.delete(user_id)
