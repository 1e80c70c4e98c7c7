"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference application DTOs only; no infrastructure imports.

Paging is expressed as skip/limit; every listing is ordered by insertion.
Write methods flush within the caller's transaction; storage faults raise
StorageException.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from sweem.application.dtos.client import ClientCreate, ClientResult, ClientUpdate
    from sweem.application.dtos.project import (
        ProjectCreate,
        ProjectResult,
        ProjectUpdate,
    )
    from sweem.application.dtos.user import UserResult
    from sweem.domain.enums import Role


class IClientRepository(Protocol):
    """Protocol for client repository."""

    async def create_client(self, data: ClientCreate) -> ClientResult:
        """Persist a new client with a fresh id."""

    async def get_client(self, client_id: UUID) -> ClientResult | None:
        """Return the client, or None if absent."""

    async def count(self) -> int:
        """Return the number of clients."""

    async def list_clients(self, skip: int, limit: int) -> list[ClientResult]:
        """Return at most limit clients after skipping skip, in insertion order."""

    async def update_client(
        self, client_id: UUID, changes: ClientUpdate
    ) -> ClientResult | None:
        """Apply changes; return None if the client is absent."""

    async def delete_client(self, client_id: UUID) -> bool:
        """Delete the client (and its projects); False if absent."""


class IProjectRepository(Protocol):
    """Protocol for project repository."""

    async def create_project(self, data: ProjectCreate) -> ProjectResult:
        """Persist a new project with a fresh id."""

    async def get_project(self, project_id: UUID) -> ProjectResult | None:
        """Return the project, or None if absent."""

    async def count(self) -> int:
        """Return the number of projects."""

    async def list_projects(self, skip: int, limit: int) -> list[ProjectResult]:
        """Return at most limit projects after skipping skip, in insertion order."""

    async def update_project(
        self, project_id: UUID, changes: ProjectUpdate
    ) -> ProjectResult | None:
        """Apply changes; return None if the project is absent."""

    async def delete_project(self, project_id: UUID) -> bool:
        """Delete the project; False if absent."""


class IUserRepository(Protocol):
    """Protocol for user repository (credential store)."""

    async def create_user(
        self, name: str, login: str, password_hash: str, role: Role
    ) -> UserResult:
        """Persist a new user. Raises LoginAlreadyExistsException on duplicate login."""

    async def get_user(self, user_id: UUID) -> UserResult | None:
        """Return the user, or None if absent."""

    async def get_credentials_by_login(
        self, login: str
    ) -> tuple[UserResult, str] | None:
        """Return (user, password_hash) for an exact login match, or None."""

    async def exists(self, user_id: UUID) -> bool:
        """Return True if a user with this id exists."""

    async def count(self) -> int:
        """Return the number of users."""

    async def list_users(self, skip: int, limit: int) -> list[UserResult]:
        """Return at most limit users after skipping skip, in insertion order."""

    async def update_user(
        self,
        user_id: UUID,
        *,
        name: str | None = None,
        login: str | None = None,
        password_hash: str | None = None,
        role: Role | None = None,
    ) -> UserResult | None:
        """Apply non-None fields; None if absent. Raises LoginAlreadyExistsException."""

    async def delete_user(self, user_id: UUID) -> bool:
        """Delete the user; False if absent. Raises ResourceInUseException."""
