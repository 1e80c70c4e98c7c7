"""User API: thin routes delegating to UserService. Requires a bearer token."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from sweem.api.v1.dependencies import get_user_service, get_user_service_for_write
from sweem.application.dtos.user import UserCreate, UserUpdate
from sweem.application.services import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, UserService
from sweem.application.services.pagination import MAX_PAGE_SIZE
from sweem.domain.exceptions import ResourceNotFoundException
from sweem.schemas.common import CreatedResponse, PaginatedResponse
from sweem.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

router = APIRouter()


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=201,
    responses={409: {"description": "Login already registered"}},
)
async def create_user(
    body: UserCreateRequest,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Create a user; the password is hashed and never returned."""
    user_id = await service.create(UserCreate(**body.model_dump()))
    return CreatedResponse(id=user_id)


@router.get("", response_model=PaginatedResponse[UserResponse])
async def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
    page: int = Query(DEFAULT_PAGE, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
):
    """List users in creation order (paginated)."""
    result = await service.get_all(page=page, page_size=page_size)
    return PaginatedResponse[UserResponse].from_result(
        result, UserResponse.model_validate
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    service: Annotated[UserService, Depends(get_user_service)],
):
    """Get user by id."""
    user = await service.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundException("user", str(user_id))
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={409: {"description": "Login already registered"}},
)
async def update_user(
    user_id: UUID,
    body: UserUpdateRequest,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Update user (partial). A password in the body replaces the stored one."""
    updated = await service.update(user_id, UserUpdate(**body.to_changes()))
    if updated is None:
        raise ResourceNotFoundException("user", str(user_id))
    return UserResponse.model_validate(updated)


@router.delete(
    "/{user_id}",
    status_code=204,
    responses={409: {"description": "User still manages projects"}},
)
async def delete_user(
    user_id: UUID,
    service: Annotated[UserService, Depends(get_user_service_for_write)],
):
    """Delete user."""
    if not await service.delete(user_id):
        raise ResourceNotFoundException("user", str(user_id))
    return Response(status_code=204)
