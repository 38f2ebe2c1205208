"""Pydantic models for user API requests and responses."""

from __future__ import annotations

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from accounts.application.value_objects import UserProjection

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 32


def _check_email_syntax(value: str) -> str:
    """Reject malformed addresses and return the address exactly as sent."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email_syntax)]


class CreateUserRequest(BaseModel):
    """Request model for registering a user."""

    name: str = Field(
        ...,
        description="Display name",
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
    )
    email: EmailAddress = Field(..., description="Email address")
    password: str = Field(
        ...,
        description="Plaintext password",
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )
    password_confirm: str = Field(
        ...,
        description="Must equal password",
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )


class UpdateUserRequest(BaseModel):
    """Request model for updating a user's name and email."""

    name: str = Field(
        ...,
        description="Display name",
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
    )
    email: EmailAddress = Field(..., description="Email address")


class ChangePasswordRequest(BaseModel):
    """Request model for changing a user's password.

    Wire names are camelCase; snake_case names are accepted as well.
    """

    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(
        ...,
        alias="oldPassword",
        description="Current password",
        min_length=1,
    )
    new_password: str = Field(
        ...,
        alias="newPassword",
        description="Replacement password",
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )
    confirm_password: str = Field(
        ...,
        alias="confirmPassword",
        description="Must equal newPassword",
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )


class UserResponse(BaseModel):
    """Response model for a user. Never carries credential material."""

    id: str = Field(..., description="User ID (ULID format)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")

    @classmethod
    def from_projection(cls, user: UserProjection) -> UserResponse:
        """Convert an application projection to API response.

        Args:
            user: UserProjection from the service

        Returns:
            UserResponse
        """
        return cls(id=user.id, name=user.name, email=user.email)


class CreatedUserResponse(BaseModel):
    """Response model for a successful registration."""

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")


class UserIdResponse(BaseModel):
    """Response model echoing the affected user ID."""

    id: str = Field(..., description="User ID")


class MessageResponse(BaseModel):
    """Response model carrying a human readable confirmation."""

    message: str
