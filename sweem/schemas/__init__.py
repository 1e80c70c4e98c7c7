"""Pydantic request/response schemas for the API (camelCase on the wire)."""

from sweem.schemas.auth import LoginRequest, TokenResponse
from sweem.schemas.client import (
    ClientCreateRequest,
    ClientResponse,
    ClientUpdateRequest,
)
from sweem.schemas.common import CreatedResponse, PaginatedResponse
from sweem.schemas.health import HealthResponse
from sweem.schemas.project import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)
from sweem.schemas.user import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "ClientCreateRequest",
    "ClientResponse",
    "ClientUpdateRequest",
    "CreatedResponse",
    "HealthResponse",
    "LoginRequest",
    "PaginatedResponse",
    "ProjectCreateRequest",
    "ProjectResponse",
    "ProjectUpdateRequest",
    "TokenResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
]
