"""Application DTOs (no dependency on ORM or HTTP schemas)."""

from sweem.application.dtos.client import ClientCreate, ClientResult, ClientUpdate
from sweem.application.dtos.pagination import PaginatedResult
from sweem.application.dtos.project import ProjectCreate, ProjectResult, ProjectUpdate
from sweem.application.dtos.token import TokenClaims
from sweem.application.dtos.user import UserCreate, UserResult, UserUpdate

__all__ = [
    "ClientCreate",
    "ClientResult",
    "ClientUpdate",
    "PaginatedResult",
    "ProjectCreate",
    "ProjectResult",
    "ProjectUpdate",
    "TokenClaims",
    "UserCreate",
    "UserResult",
    "UserUpdate",
]
