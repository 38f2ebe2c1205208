"""Password hashing for stored credentials.

Uses bcrypt with a per-call random salt. bcrypt only considers the first
72 bytes of its input, so secrets are encoded as UTF-8 and cut to that
length before hashing or checking.
"""

import bcrypt

BCRYPT_MAX_PASSWORD_BYTES = 72
DEFAULT_ROUNDS = 12


def _encode(secret: str) -> bytes:
    return secret.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password using bcrypt.

    Args:
        password: The plaintext password to hash
        rounds: bcrypt work factor (log2 of the iteration count)

    Returns:
        The bcrypt hash as a string
    """
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash using constant-time comparison.

    Args:
        password: The plaintext password to verify
        password_hash: The bcrypt hash to verify against

    Returns:
        True if the password matches the hash, False otherwise (including
        when the hash is not a valid bcrypt string)
    """
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


class BcryptPasswordHasher:
    """IPasswordHasher implementation backed by bcrypt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        return hash_password(plaintext, rounds=self._rounds)

    def verify(self, plaintext: str, hashed: str) -> bool:
        return verify_password(plaintext, hashed)
