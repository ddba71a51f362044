"""Users router for user management endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from learnhub.presentation.api.dependencies import RepoFactory
from learnhub.presentation.api.schemas import (
    ErrorResponse,
    UserListResponse,
    UserResponse,
    UserWriteRequest,
)
from learnhub_identity.application.commands import (
    CreateUserCommand,
    DeactivateUserCommand,
    DeleteUserCommand,
    ReactivateUserCommand,
    UpdateUserCommand,
)
from learnhub_identity.application.queries import GetUserQuery, ListUsersQuery

router = APIRouter()

ActiveOnlyFilter = Annotated[
    bool,
    Query(alias="active", description="Only return active users"),
]

NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def create_user(
    request: UserWriteRequest,
    factory: RepoFactory,
) -> UserResponse:
    """Register a new, active user. Emails are unique across all users."""
    command = CreateUserCommand.from_factory(factory)

    try:
        user = await command.execute(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            age=request.age,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return UserResponse.from_dto(user)


@router.get("", summary="List users")
async def list_users(
    factory: RepoFactory,
    active_only: ActiveOnlyFilter = False,
) -> UserListResponse:
    """List all users, or only active ones with `?active=true`."""
    result = await ListUsersQuery.from_factory(factory).execute(
        active_only=active_only,
    )
    return UserListResponse(
        users=[UserResponse.from_dto(dto) for dto in result.users],
        total=result.total_count,
    )


@router.get("/{user_id}", summary="Get user", responses=NOT_FOUND)
async def get_user(user_id: UUID, factory: RepoFactory) -> UserResponse:
    """Get a user by id. Deactivated users are returned too."""
    user = await GetUserQuery.from_factory(factory).execute(user_id)
    return UserResponse.from_dto(user)


@router.put(
    "/{user_id}",
    summary="Update user",
    responses={
        **NOT_FOUND,
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_user(
    user_id: UUID,
    request: UserWriteRequest,
    factory: RepoFactory,
) -> UserResponse:
    """Replace the user's profile. Keeping the current email is allowed."""
    command = UpdateUserCommand.from_factory(factory)

    try:
        user = await command.execute(
            user_id=user_id,
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            age=request.age,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_dto(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Deactivate user",
    responses=NOT_FOUND,
)
async def deactivate_user(user_id: UUID, factory: RepoFactory) -> None:
    """Soft delete: the user is marked inactive but stays retrievable."""
    command = DeactivateUserCommand.from_factory(factory)

    try:
        await command.execute(user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise


@router.post("/{user_id}/activate", summary="Reactivate user", responses=NOT_FOUND)
async def reactivate_user(user_id: UUID, factory: RepoFactory) -> UserResponse:
    """Mark a deactivated user as active again."""
    command = ReactivateUserCommand.from_factory(factory)

    try:
        user = await command.execute(user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return UserResponse.from_dto(user)


@router.delete(
    "/{user_id}/permanent",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user permanently",
    responses=NOT_FOUND,
)
async def delete_user(user_id: UUID, factory: RepoFactory) -> None:
    """Hard delete: remove the user record."""
    command = DeleteUserCommand.from_factory(factory)

    try:
        await command.execute(user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
