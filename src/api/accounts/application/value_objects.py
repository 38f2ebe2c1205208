"""Application-level value objects for the accounts context."""

from __future__ import annotations

from dataclasses import dataclass

from accounts.domain import User


@dataclass(frozen=True)
class UserProjection:
    """The client-safe view of a user.

    Has no password field; build it with ``from_domain``.
    """

    id: str
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> UserProjection:
        return cls(id=user.id.value, name=user.name, email=user.email)
