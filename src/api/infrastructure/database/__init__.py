"""Database infrastructure - shared connection primitives."""

from infrastructure.database.dependencies import (
    check_database_connection,
    close_database_connections,
    get_engine,
    get_session,
)
from infrastructure.database.models import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
    "check_database_connection",
    "close_database_connections",
    "get_engine",
    "get_session",
]
