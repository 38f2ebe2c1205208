"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance. The users table is
created from the ORM metadata and emptied around each test.
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from pydantic import SecretStr
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from accounts.infrastructure.models import UserModel  # noqa: F401
from infrastructure.database.engines import create_engine
from infrastructure.database.models import Base
from infrastructure.settings import DatabaseSettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    Override with environment variables:
        ACCOUNTS_DB_HOST, ACCOUNTS_DB_PORT, etc.
    """
    return DatabaseSettings(
        host=os.getenv("ACCOUNTS_DB_HOST", "localhost"),
        port=int(os.getenv("ACCOUNTS_DB_PORT", "5432")),
        database=os.getenv("ACCOUNTS_DB_DATABASE", "accounts"),
        username=os.getenv("ACCOUNTS_DB_USERNAME", "accounts"),
        password=SecretStr(os.getenv("ACCOUNTS_DB_PASSWORD", "accounts_dev_password")),
    )


@pytest_asyncio.fixture
async def session_factory(
    integration_db_settings: DatabaseSettings,
) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Provide a session factory over a clean users table."""
    engine = create_engine(integration_db_settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(text("TRUNCATE TABLE users"))

    yield async_sessionmaker(engine, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.execute(text("TRUNCATE TABLE users"))
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide an async session for integration tests."""
    async with session_factory() as session:
        yield session
