"""Shared fixtures for accounts unit tests."""

from __future__ import annotations

from unittest.mock import create_autospec

import pytest

from accounts.application.observability import UserServiceProbe
from accounts.application.security import BcryptPasswordHasher
from accounts.application.services import UserService
from accounts.domain import User, UserId
from accounts.ports.exceptions import DuplicateEmailError
from accounts.ports.repositories import IUserRepository

# Lowest cost bcrypt accepts
TEST_HASH_ROUNDS = 4


class InMemoryUserRepository(IUserRepository):
    """Dict-backed IUserRepository that enforces unique emails like the store."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self.mutations = 0

    async def list_users(self) -> list[User]:
        return list(self.users.values())

    async def get_user(self, user_id: UserId) -> User | None:
        return self.users.get(user_id.value)

    async def get_user_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email), None)

    async def create_user(self, name: str, email: str, password_hash: str) -> User:
        if await self.get_user_by_email(email) is not None:
            raise DuplicateEmailError(email)
        user = User(
            id=UserId.generate(), name=name, email=email, password_hash=password_hash
        )
        self.users[user.id.value] = user
        self.mutations += 1
        return user

    async def update_user(self, user_id: UserId, name: str, email: str) -> bool:
        existing = self.users.get(user_id.value)
        if existing is None:
            return False
        self.users[user_id.value] = User(
            id=user_id, name=name, email=email, password_hash=existing.password_hash
        )
        self.mutations += 1
        return True

    async def delete_user(self, user_id: UserId) -> bool:
        if self.users.pop(user_id.value, None) is None:
            return False
        self.mutations += 1
        return True

    async def update_user_password(self, user_id: UserId, password_hash: str) -> bool:
        existing = self.users.get(user_id.value)
        if existing is None:
            return False
        self.users[user_id.value] = User(
            id=user_id,
            name=existing.name,
            email=existing.email,
            password_hash=password_hash,
        )
        self.mutations += 1
        return True

    async def is_email_taken(self, email: str) -> bool:
        return await self.get_user_by_email(email) is not None


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """Real bcrypt hasher at minimum cost."""
    return BcryptPasswordHasher(rounds=TEST_HASH_ROUNDS)


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    """Empty in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def mock_service_probe():
    """Mock UserServiceProbe."""
    return create_autospec(UserServiceProbe, instance=True)


@pytest.fixture
def memory_user_service(
    memory_repository, password_hasher, mock_service_probe
) -> UserService:
    """UserService over the in-memory store and a real hasher."""
    return UserService(
        user_repository=memory_repository,
        password_hasher=password_hasher,
        probe=mock_service_probe,
    )
