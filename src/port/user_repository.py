"""Port for user account data access."""

from typing import Protocol

from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""

    def create(self, email: str, password_hash: str, name: str) -> User | None:
        """Create a new user. Returns None if the email is taken or the write failed."""
        ...

    def get_by_email(self, email: str) -> User | None:
        ...

    def get_by_id(self, user_id: str) -> User | None:
        ...

    def update_last_login(self, user_id: str) -> bool:
        """Stamp last_login. Returns True if the user was updated."""
        ...
