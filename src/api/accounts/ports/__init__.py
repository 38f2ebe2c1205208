"""Ports (interfaces) for the accounts bounded context."""

from accounts.ports.exceptions import (
    ConstraintError,
    DuplicateEmailError,
    StoreError,
)
from accounts.ports.hashing import IPasswordHasher
from accounts.ports.repositories import IUserRepository

__all__ = [
    "ConstraintError",
    "DuplicateEmailError",
    "IPasswordHasher",
    "IUserRepository",
    "StoreError",
]
