"""User aggregate for the accounts context."""

from __future__ import annotations

from dataclasses import dataclass, field

from accounts.domain.value_objects import UserId


@dataclass(frozen=True)
class User:
    """A stored user account.

    The password is only ever held as a one-way hash. ``password_hash`` is
    excluded from ``repr`` so it does not end up in logs or tracebacks.
    """

    id: UserId
    name: str
    email: str
    password_hash: str = field(repr=False)

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.email})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
