"""SQLAlchemy ORM models for the accounts bounded context."""

from accounts.infrastructure.models.user import UserModel

__all__ = ["UserModel"]
