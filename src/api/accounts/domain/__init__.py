"""Domain layer for the accounts bounded context."""

from accounts.domain.user import User
from accounts.domain.value_objects import UserId

__all__ = ["User", "UserId"]
