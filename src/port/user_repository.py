from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access.

    Emails passed in are expected to be normalized already; implementations
    must still enforce email uniqueness on create and update.
    """
    def create(self, first_name: str, last_name: str, email: str, password_hash: str) -> User:
        """Create a new user. Raise DuplicateEmailError if the email is taken."""
        ...

    def find_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def find_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def update_by_id(self, user_id: str, fields: dict) -> User | None:
        """Merge the given fields into a user. Return the updated User or None if not found."""
        ...

    def delete_by_id(self, user_id: str) -> bool:
        """Delete a user. Return True if a record was removed."""
        ...

    def list_all(self) -> list[User]:
        """Return every user in storage iteration order."""
        ...
