"""HTTP routes for user account management."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from accounts.application.errors import UserErrorKind, UserServiceError
from accounts.application.services import UserService
from accounts.dependencies.user import get_user_service
from accounts.domain import UserId
from accounts.presentation.users.models import (
    ChangePasswordRequest,
    CreatedUserResponse,
    CreateUserRequest,
    MessageResponse,
    UpdateUserRequest,
    UserIdResponse,
    UserResponse,
)

router = APIRouter(
    prefix="/users",
    tags=["users"],
)

PASSWORD_CHANGED_MESSAGE = "Password successfully changed"

# Domain refusals are 422; unreadable stores and unexpected faults are 500.
ERROR_STATUS_CODES: dict[UserErrorKind, int] = {
    UserErrorKind.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.INVALID_PASSWORD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.PASSWORD_MISMATCH: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.EMAIL_ALREADY_TAKEN: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.NOT_FOUND: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.INCORRECT_PASSWORD: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.CREATE_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.UPDATE_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.DELETE_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.CHANGE_PASSWORD_FAILED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UserErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    UserErrorKind.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(kind: UserErrorKind, message: str) -> HTTPException:
    """Build the HTTP error for a failed user operation.

    Args:
        kind: Failure kind reported by the service
        message: Client-safe description

    Returns:
        HTTPException whose detail is ``{"error": kind, "message": message}``
    """
    return HTTPException(
        status_code=ERROR_STATUS_CODES[kind],
        detail={"error": kind.value, "message": message},
    )


def _parse_user_id(user_id: str) -> UserId:
    """Parse a path ID; a malformed ID cannot name an existing user."""
    try:
        return UserId.from_string(user_id)
    except ValueError:
        raise error_response(UserErrorKind.NOT_FOUND, "Unknown user")


@router.get("")
async def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """List all users.

    Args:
        service: User service for orchestration

    Returns:
        List of UserResponse objects, oldest first
    """
    try:
        users = await service.get_users()
    except UserServiceError as e:
        raise error_response(e.kind, e.message) from e

    return [UserResponse.from_projection(user) for user in users]


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Get a user by ID.

    Raises:
        HTTPException: 422 NOT_FOUND if the user does not exist
    """
    parsed_id = _parse_user_id(user_id)

    try:
        user = await service.get_user(parsed_id)
    except UserServiceError as e:
        raise error_response(e.kind, e.message) from e

    if user is None:
        raise error_response(UserErrorKind.NOT_FOUND, "Unknown user")

    return UserResponse.from_projection(user)


@router.post("")
async def create_user(
    request: CreateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> CreatedUserResponse:
    """Register a new user.

    Args:
        request: Name, email and the password typed twice
        service: User service for orchestration

    Returns:
        CreatedUserResponse echoing name and email

    Raises:
        HTTPException: 422 INVALID_PASSWORD, EMAIL_ALREADY_TAKEN or
            CREATE_FAILED
    """
    try:
        await service.create_user(
            name=request.name,
            email=request.email,
            password=request.password,
            password_confirm=request.password_confirm,
        )
    except UserServiceError as e:
        raise error_response(e.kind, e.message) from e

    return CreatedUserResponse(name=request.name, email=request.email)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserIdResponse:
    """Update a user's name and email.

    Raises:
        HTTPException: 422 NOT_FOUND, EMAIL_ALREADY_TAKEN or UPDATE_FAILED
    """
    parsed_id = _parse_user_id(user_id)

    try:
        await service.update_user(parsed_id, name=request.name, email=request.email)
    except UserServiceError as e:
        raise error_response(e.kind, e.message) from e

    return UserIdResponse(id=parsed_id.value)


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserIdResponse:
    """Delete a user.

    Raises:
        HTTPException: 422 NOT_FOUND or DELETE_FAILED
    """
    parsed_id = _parse_user_id(user_id)

    try:
        await service.delete_user(parsed_id)
    except UserServiceError as e:
        raise error_response(e.kind, e.message) from e

    return UserIdResponse(id=parsed_id.value)


@router.post("/{user_id}/change-password")
async def change_password(
    user_id: str,
    request: ChangePasswordRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> MessageResponse:
    """Change a user's password after checking the current one.

    Raises:
        HTTPException: 422 PASSWORD_MISMATCH, NOT_FOUND, INCORRECT_PASSWORD
            or CHANGE_PASSWORD_FAILED
    """
    parsed_id = _parse_user_id(user_id)

    try:
        await service.change_password(
            parsed_id,
            old_password=request.old_password,
            new_password=request.new_password,
            confirm_password=request.confirm_password,
        )
    except UserServiceError as e:
        raise error_response(e.kind, e.message) from e

    return MessageResponse(message=PASSWORD_CHANGED_MESSAGE)
