"""User application service for the accounts bounded context.

Orchestrates validation, email uniqueness checks, password hashing and
repository calls for the user lifecycle. This is the only place domain
failures are raised; each one is a ``UserServiceError`` carrying a
``UserErrorKind``.

Email uniqueness is checked before writing, but the check and the write
are not atomic: two concurrent registrations for the same address can
both pass the check. The store's unique index on ``users.email`` is the
actual guarantee, and its violation (``DuplicateEmailError``) is reported
as ``EMAIL_ALREADY_TAKEN`` just like a failed pre-check.

Emails are compared exactly as given. Hashing and verification run on a
worker thread through ``asyncio.to_thread``.
"""

from __future__ import annotations

import asyncio

from accounts.application.errors import UserErrorKind, UserServiceError
from accounts.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from accounts.application.value_objects import UserProjection
from accounts.domain import User, UserId
from accounts.ports.exceptions import DuplicateEmailError, StoreError
from accounts.ports.hashing import IPasswordHasher
from accounts.ports.repositories import IUserRepository


class UserService:
    """Application service for user account management."""

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        probe: UserServiceProbe | None = None,
    ):
        """Initialize UserService with dependencies.

        Args:
            user_repository: Repository for user persistence
            password_hasher: One-way hasher for stored passwords
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._probe = probe or DefaultUserServiceProbe()

    def _reject(
        self,
        operation: str,
        kind: UserErrorKind,
        message: str,
        user_id: UserId | None = None,
    ) -> UserServiceError:
        self._probe.user_operation_rejected(
            operation=operation,
            kind=kind.value,
            user_id=user_id.value if user_id else None,
        )
        return UserServiceError(kind, message)

    def _fail(
        self,
        operation: str,
        kind: UserErrorKind,
        message: str,
        error: Exception,
        user_id: UserId | None = None,
    ) -> UserServiceError:
        self._probe.user_operation_failed(
            operation=operation,
            error=str(error),
            user_id=user_id.value if user_id else None,
        )
        return UserServiceError(kind, message)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def get_users(self) -> list[UserProjection]:
        """List every user as a client-safe projection.

        Returns:
            Projections in repository order

        Raises:
            UserServiceError: STORE_FAILURE if the store cannot be read
        """
        try:
            users = await self._user_repository.list_users()
        except StoreError as e:
            raise self._fail(
                "get_users", UserErrorKind.STORE_FAILURE, "Failed to list users", e
            ) from e
        return [UserProjection.from_domain(user) for user in users]

    async def get_user(self, user_id: UserId) -> UserProjection | None:
        """Get one user as a client-safe projection.

        Args:
            user_id: The user to fetch

        Returns:
            The projection, or None if the user does not exist

        Raises:
            UserServiceError: STORE_FAILURE if the store cannot be read
        """
        try:
            user = await self._user_repository.get_user(user_id)
        except StoreError as e:
            raise self._fail(
                "get_user",
                UserErrorKind.STORE_FAILURE,
                "Failed to retrieve user",
                e,
                user_id,
            ) from e
        if user is None:
            return None
        return UserProjection.from_domain(user)

    async def is_email_taken(self, email: str) -> bool:
        """Check whether an email address is already registered."""
        try:
            return await self._user_repository.is_email_taken(email)
        except StoreError as e:
            raise self._fail(
                "is_email_taken",
                UserErrorKind.STORE_FAILURE,
                "Failed to check email",
                e,
            ) from e

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create_user(
        self,
        name: str,
        email: str,
        password: str,
        password_confirm: str,
    ) -> None:
        """Register a new user.

        Checks run in a fixed order: password confirmation, email
        uniqueness, then the write. Nothing is stored unless every check
        passes.

        Args:
            name: Display name
            email: Email address, compared exactly
            password: Plaintext password
            password_confirm: Must equal ``password``

        Raises:
            UserServiceError: INVALID_PASSWORD, EMAIL_ALREADY_TAKEN or
                CREATE_FAILED
        """
        operation = "create_user"

        if not password or not password_confirm or password != password_confirm:
            raise self._reject(
                operation, UserErrorKind.INVALID_PASSWORD, "Invalid password"
            )

        try:
            email_taken = await self._user_repository.is_email_taken(email)
        except StoreError as e:
            raise self._fail(
                operation, UserErrorKind.CREATE_FAILED, "Failed to create user", e
            ) from e

        if email_taken:
            raise self._reject(
                operation, UserErrorKind.EMAIL_ALREADY_TAKEN, "Email already taken"
            )

        password_hash = await asyncio.to_thread(self._password_hasher.hash, password)

        try:
            user = await self._user_repository.create_user(
                name=name,
                email=email,
                password_hash=password_hash,
            )
        except DuplicateEmailError as e:
            # Lost the race against a concurrent registration
            raise self._reject(
                operation, UserErrorKind.EMAIL_ALREADY_TAKEN, "Email already taken"
            ) from e
        except StoreError as e:
            raise self._fail(
                operation, UserErrorKind.CREATE_FAILED, "Failed to create user", e
            ) from e

        self._probe.user_created(user_id=user.id.value, email=user.email)

    async def update_user(self, user_id: UserId, name: str, email: str) -> None:
        """Update a user's name and email.

        Args:
            user_id: The user to update
            name: New display name
            email: New email address

        Raises:
            UserServiceError: NOT_FOUND, EMAIL_ALREADY_TAKEN or UPDATE_FAILED
        """
        operation = "update_user"
        failure = "Failed to update user"

        existing = await self._load_for(
            operation, user_id, UserErrorKind.UPDATE_FAILED, failure
        )

        if email != existing.email:
            try:
                owner = await self._user_repository.get_user_by_email(email)
            except StoreError as e:
                raise self._fail(
                    operation, UserErrorKind.UPDATE_FAILED, failure, e, user_id
                ) from e
            if owner is not None and owner.id != user_id:
                raise self._reject(
                    operation,
                    UserErrorKind.EMAIL_ALREADY_TAKEN,
                    "Email already taken",
                    user_id,
                )

        try:
            updated = await self._user_repository.update_user(user_id, name, email)
        except DuplicateEmailError as e:
            raise self._reject(
                operation,
                UserErrorKind.EMAIL_ALREADY_TAKEN,
                "Email already taken",
                user_id,
            ) from e
        except StoreError as e:
            raise self._fail(
                operation, UserErrorKind.UPDATE_FAILED, failure, e, user_id
            ) from e

        if not updated:
            raise self._reject(
                operation, UserErrorKind.NOT_FOUND, "Unknown user", user_id
            )

        self._probe.user_updated(user_id=user_id.value)

    async def delete_user(self, user_id: UserId) -> None:
        """Permanently delete a user.

        Args:
            user_id: The user to delete

        Raises:
            UserServiceError: NOT_FOUND or DELETE_FAILED
        """
        operation = "delete_user"
        failure = "Failed to delete user"

        await self._load_for(operation, user_id, UserErrorKind.DELETE_FAILED, failure)

        try:
            deleted = await self._user_repository.delete_user(user_id)
        except StoreError as e:
            raise self._fail(
                operation, UserErrorKind.DELETE_FAILED, failure, e, user_id
            ) from e

        if not deleted:
            raise self._reject(
                operation, UserErrorKind.NOT_FOUND, "Unknown user", user_id
            )

        self._probe.user_deleted(user_id=user_id.value)

    async def change_password(
        self,
        user_id: UserId,
        old_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        """Replace a user's password after verifying the current one.

        The new password is allowed to equal the old one.

        Args:
            user_id: The user whose password changes
            old_password: Current plaintext password
            new_password: Replacement plaintext password
            confirm_password: Must equal ``new_password``

        Raises:
            UserServiceError: PASSWORD_MISMATCH, NOT_FOUND,
                INCORRECT_PASSWORD or CHANGE_PASSWORD_FAILED
        """
        operation = "change_password"
        failure = "Failed to change password"

        if new_password != confirm_password:
            raise self._reject(
                operation,
                UserErrorKind.PASSWORD_MISMATCH,
                "Passwords do not match",
                user_id,
            )

        user = await self._load_for(
            operation, user_id, UserErrorKind.CHANGE_PASSWORD_FAILED, failure
        )

        old_password_ok = await asyncio.to_thread(
            self._password_hasher.verify, old_password, user.password_hash
        )
        if not old_password_ok:
            raise self._reject(
                operation,
                UserErrorKind.INCORRECT_PASSWORD,
                "Old password is incorrect",
                user_id,
            )

        new_hash = await asyncio.to_thread(self._password_hasher.hash, new_password)

        try:
            updated = await self._user_repository.update_user_password(
                user_id, new_hash
            )
        except StoreError as e:
            raise self._fail(
                operation, UserErrorKind.CHANGE_PASSWORD_FAILED, failure, e, user_id
            ) from e

        if not updated:
            raise self._reject(
                operation, UserErrorKind.NOT_FOUND, "Unknown user", user_id
            )

        self._probe.password_changed(user_id=user_id.value)

    async def _load_for(
        self,
        operation: str,
        user_id: UserId,
        failure_kind: UserErrorKind,
        failure_message: str,
    ) -> User:
        """Fetch the user an operation targets, or raise NOT_FOUND.

        A store failure during the lookup is reported with the calling
        operation's own failure kind.
        """
        try:
            user = await self._user_repository.get_user(user_id)
        except StoreError as e:
            raise self._fail(
                operation, failure_kind, failure_message, e, user_id
            ) from e

        if user is None:
            raise self._reject(
                operation, UserErrorKind.NOT_FOUND, "Unknown user", user_id
            )
        return user
