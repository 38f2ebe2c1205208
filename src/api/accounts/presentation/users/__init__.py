"""User account routes and models."""

from accounts.presentation.users.routes import router

__all__ = ["router"]
