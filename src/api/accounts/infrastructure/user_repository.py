"""PostgreSQL implementation of IUserRepository.

Each mutating call commits its own unit of work. Any driver or SQLAlchemy
failure rolls the session back and is re-raised as ``StoreError`` with the
original exception chained, so callers never handle SQLAlchemy types.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.domain import User, UserId
from accounts.infrastructure.models import UserModel
from accounts.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from accounts.ports.exceptions import DuplicateEmailError, StoreError
from accounts.ports.repositories import IUserRepository


class UserRepository(IUserRepository):
    """PostgreSQL-backed repository for users."""

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: AsyncSession from FastAPI dependency injection
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    @asynccontextmanager
    async def _store_errors(
        self, operation: str, email: str | None = None
    ) -> AsyncIterator[None]:
        """Translate store failures raised inside the block.

        Args:
            operation: Name used in the probe event and error message
            email: For writes touching the email column; an integrity
                violation is then reported as DuplicateEmailError (email is
                the only unique column besides the generated primary key)
        """
        try:
            yield
        except IntegrityError as e:
            await self._session.rollback()
            if email is None:
                self._probe.store_operation_failed(operation=operation, error=str(e))
                raise StoreError(f"{operation} failed") from e
            self._probe.duplicate_email(email)
            raise DuplicateEmailError(email) from e
        except (SQLAlchemyError, OSError) as e:
            await self._session.rollback()
            self._probe.store_operation_failed(operation=operation, error=str(e))
            raise StoreError(f"{operation} failed") from e

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=UserId(value=model.id),
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
        )

    async def list_users(self) -> list[User]:
        """List all users, oldest first."""
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id)
        async with self._store_errors("list_users"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._to_domain(model) for model in models]

    async def get_user(self, user_id: UserId) -> User | None:
        """Retrieve a user by ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User, or None if not found
        """
        stmt = select(UserModel).where(UserModel.id == user_id.value)
        async with self._store_errors("get_user"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            self._probe.user_not_found(user_id.value)
            return None

        self._probe.user_retrieved(user_id.value)
        return self._to_domain(model)

    async def get_user_by_email(self, email: str) -> User | None:
        """Retrieve a user by exact email match."""
        stmt = select(UserModel).where(UserModel.email == email)
        async with self._store_errors("get_user_by_email"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    async def create_user(self, name: str, email: str, password_hash: str) -> User:
        """Insert a new user with a freshly generated ID.

        Raises:
            DuplicateEmailError: If another row already holds ``email``
            StoreError: For any other store failure
        """
        user_id = UserId.generate()
        model = UserModel(
            id=user_id.value,
            name=name,
            email=email,
            password_hash=password_hash,
        )

        async with self._store_errors("create_user", email=email):
            self._session.add(model)
            await self._session.commit()

        self._probe.user_saved(user_id.value, email)
        return User(
            id=user_id,
            name=name,
            email=email,
            password_hash=password_hash,
        )

    async def update_user(self, user_id: UserId, name: str, email: str) -> bool:
        """Update name and email in place.

        Returns:
            True if a row was updated, False if no row has this ID
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id.value)
            .values(name=name, email=email)
            .execution_options(synchronize_session=False)
        )
        async with self._store_errors("update_user", email=email):
            result = await self._session.execute(stmt)
            await self._session.commit()

        return result.rowcount > 0

    async def delete_user(self, user_id: UserId) -> bool:
        """Delete the row for this ID.

        Returns:
            True if a row was removed, False if no row has this ID
        """
        stmt = (
            delete(UserModel)
            .where(UserModel.id == user_id.value)
            .execution_options(synchronize_session=False)
        )
        async with self._store_errors("delete_user"):
            result = await self._session.execute(stmt)
            await self._session.commit()

        return result.rowcount > 0

    async def update_user_password(self, user_id: UserId, password_hash: str) -> bool:
        """Replace the stored password hash.

        Returns:
            True if a row was updated, False if no row has this ID
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id.value)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session=False)
        )
        async with self._store_errors("update_user_password"):
            result = await self._session.execute(stmt)
            await self._session.commit()

        return result.rowcount > 0

    async def is_email_taken(self, email: str) -> bool:
        """Check for an exact-match email."""
        stmt = select(UserModel.id).where(UserModel.email == email).limit(1)
        async with self._store_errors("is_email_taken"):
            result = await self._session.execute(stmt)
            existing_id = result.scalar_one_or_none()
        return existing_id is not None
