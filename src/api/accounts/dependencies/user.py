"""Dependency wiring for the user routes.

Each request gets its own session, repository and service. Probes are bound
to an ObservationContext carrying the request ID so that events emitted by
the service and the repository for one request can be correlated.
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from ulid import ULID

from accounts.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from accounts.application.security import BcryptPasswordHasher
from accounts.application.services import UserService
from accounts.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from accounts.infrastructure.user_repository import UserRepository
from accounts.ports.hashing import IPasswordHasher
from infrastructure.database.dependencies import get_session
from infrastructure.observability import ObservationContext
from infrastructure.settings import Settings, get_settings

REQUEST_ID_HEADER = "X-Request-ID"


def get_observation_context(request: Request) -> ObservationContext:
    """Build the observation context for the current request.

    Uses the caller's X-Request-ID header when present, otherwise a fresh
    ULID.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(ULID())
    return ObservationContext(request_id=request_id)


def get_user_repository_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> UserRepositoryProbe:
    """Get UserRepositoryProbe instance bound to the request context."""
    return DefaultUserRepositoryProbe().with_context(context)


def get_user_service_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> UserServiceProbe:
    """Get UserServiceProbe instance bound to the request context."""
    return DefaultUserServiceProbe().with_context(context)


def get_password_hasher(
    settings: Annotated[Settings, Depends(get_settings)],
) -> IPasswordHasher:
    """Get the password hasher configured with the bcrypt work factor."""
    return BcryptPasswordHasher(rounds=settings.password_hash_rounds)


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
    probe: Annotated[UserRepositoryProbe, Depends(get_user_repository_probe)],
) -> UserRepository:
    """Get UserRepository instance.

    Args:
        session: Async database session
        probe: Repository probe bound to the request context

    Returns:
        UserRepository instance
    """
    return UserRepository(session=session, probe=probe)


def get_user_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[IPasswordHasher, Depends(get_password_hasher)],
    probe: Annotated[UserServiceProbe, Depends(get_user_service_probe)],
) -> UserService:
    """Get UserService instance.

    Args:
        user_repository: User repository for persistence
        password_hasher: Hasher for stored passwords
        probe: Service probe bound to the request context

    Returns:
        UserService instance
    """
    return UserService(
        user_repository=user_repository,
        password_hasher=password_hasher,
        probe=probe,
    )
