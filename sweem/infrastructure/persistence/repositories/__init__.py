"""SQLAlchemy repositories. Public methods return application DTOs."""

from sweem.infrastructure.persistence.repositories.base import BaseRepository
from sweem.infrastructure.persistence.repositories.client_repo import ClientRepository
from sweem.infrastructure.persistence.repositories.project_repo import (
    ProjectRepository,
)
from sweem.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "ClientRepository",
    "ProjectRepository",
    "UserRepository",
]
