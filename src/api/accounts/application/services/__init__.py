"""Application services for the accounts bounded context.

Application services orchestrate the repository, the password hasher and
observability to fulfil use cases. They are the "front door" to the
accounts context.
"""

from accounts.application.services.user_service import UserService

__all__ = ["UserService"]
