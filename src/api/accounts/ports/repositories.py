"""Repository protocols (ports) for the accounts bounded context.

Repository protocols define the interface for persisting and retrieving
users. Implementations return plain ``User`` records and raise
``StoreError`` (or a subclass) on any backend failure.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from accounts.domain import User, UserId


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User persistence.

    Email lookups are exact-match; no case folding is applied.
    """

    async def list_users(self) -> list[User]:
        """List all users.

        Returns:
            Every stored user, oldest first

        Raises:
            StoreError: If the store cannot be read
        """
        ...

    async def get_user(self, user_id: UserId) -> User | None:
        """Retrieve a user by ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User, or None if not found
        """
        ...

    async def get_user_by_email(self, email: str) -> User | None:
        """Retrieve a user by exact email match.

        Args:
            email: The email address to search for

        Returns:
            The User, or None if not found
        """
        ...

    async def create_user(self, name: str, email: str, password_hash: str) -> User:
        """Persist a new user, assigning its ID.

        Args:
            name: Display name
            email: Email address (must be unused)
            password_hash: Already-hashed password

        Returns:
            The stored User

        Raises:
            DuplicateEmailError: If the store's unique email index is violated
            StoreError: For any other store failure
        """
        ...

    async def update_user(self, user_id: UserId, name: str, email: str) -> bool:
        """Update a user's name and email.

        Args:
            user_id: The user to update
            name: New display name
            email: New email address

        Returns:
            True if a row was updated, False if the user does not exist

        Raises:
            DuplicateEmailError: If the email belongs to another user
            StoreError: For any other store failure
        """
        ...

    async def delete_user(self, user_id: UserId) -> bool:
        """Permanently remove a user.

        Args:
            user_id: The user to delete

        Returns:
            True if a row was removed, False if the user does not exist
        """
        ...

    async def update_user_password(self, user_id: UserId, password_hash: str) -> bool:
        """Replace a user's password hash.

        Args:
            user_id: The user to update
            password_hash: The new, already-hashed password

        Returns:
            True if a row was updated, False if the user does not exist
        """
        ...

    async def is_email_taken(self, email: str) -> bool:
        """Check whether any user holds this exact email address.

        Args:
            email: The email address to check

        Returns:
            True if a user with this email exists
        """
        ...
