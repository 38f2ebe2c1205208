"""Domain-Oriented Observability for the accounts application layer."""

from accounts.application.observability.user_service_probe import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)

__all__ = [
    "UserServiceProbe",
    "DefaultUserServiceProbe",
]
