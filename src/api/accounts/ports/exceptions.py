"""Store-level exceptions for the accounts bounded context.

These exceptions are raised by repository implementations and represent
failures of the persistence backend. They should be caught and translated
by the application layer; they never reach HTTP clients directly.
"""


class StoreError(Exception):
    """Raised when the store cannot complete an operation.

    Covers transport faults, timeouts and any other driver-level error.
    The original driver exception is chained as ``__cause__``.
    """

    pass


class ConstraintError(StoreError):
    """Raised when the store rejects a write because of a declared constraint."""

    pass


class DuplicateEmailError(ConstraintError):
    """Raised when a write would give two users the same email address.

    This is the store's own enforcement of email uniqueness, and the only
    guarantee that holds under concurrent registrations. The application
    layer reports it the same way as a failed uniqueness pre-check.
    """

    def __init__(self, email: str):
        super().__init__(f"Email already in use: {email}")
        self.email = email
