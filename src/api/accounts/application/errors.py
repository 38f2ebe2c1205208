"""Error kinds raised at the user service boundary.

Every failure the service reports carries exactly one ``UserErrorKind``.
The presentation layer maps kinds to HTTP status codes with a lookup
table; it never needs to know which exception class was involved.
"""

from __future__ import annotations

from enum import StrEnum


class UserErrorKind(StrEnum):
    """Reasons a user operation can fail."""

    INVALID_INPUT = "INVALID_INPUT"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    EMAIL_ALREADY_TAKEN = "EMAIL_ALREADY_TAKEN"
    NOT_FOUND = "NOT_FOUND"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
    CREATE_FAILED = "CREATE_FAILED"
    UPDATE_FAILED = "UPDATE_FAILED"
    DELETE_FAILED = "DELETE_FAILED"
    CHANGE_PASSWORD_FAILED = "CHANGE_PASSWORD_FAILED"
    STORE_FAILURE = "STORE_FAILURE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class UserServiceError(Exception):
    """A user operation failed for the reason given by ``kind``.

    ``message`` is safe to show to API clients. When the failure came from
    the store, the underlying exception is chained as ``__cause__`` for
    logging only.
    """

    def __init__(self, kind: UserErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"UserServiceError(kind={self.kind.value!r}, message={self.message!r})"
