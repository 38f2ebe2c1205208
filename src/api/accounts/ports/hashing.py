"""Credential hashing protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way hashing for credentials stored at rest."""

    def hash(self, plaintext: str) -> str:
        """Hash a plaintext password with a fresh random salt.

        Args:
            plaintext: The password to hash

        Returns:
            The encoded hash, salt and parameters included
        """
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash.

        Args:
            plaintext: The candidate password
            hashed: The stored hash

        Returns:
            True if the password matches; False on mismatch or when the
            stored hash is malformed
        """
        ...
