"""
models/user.py
--------------
Domain model for a user record.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a single user row.

    Attributes:
        name: Display name (free text, may be None).
        email: Email address (free text, not unique, may be None).
        id: Database primary key (None until the record is saved).
    """
    name: Optional[str]
    email: Optional[str]
    id: Optional[int] = None

    def is_persisted(self) -> bool:
        """Returns True once storage has assigned an identifier."""
        return self.id is not None

    def __str__(self) -> str:
        return f"{self.id} {self.name} {self.email}"
