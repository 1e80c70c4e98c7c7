"""Client application service: CRUD and paginated listing."""

from __future__ import annotations

from uuid import UUID

from sweem.application.dtos.client import ClientCreate, ClientResult, ClientUpdate
from sweem.application.dtos.pagination import PaginatedResult
from sweem.application.interfaces.repositories import IClientRepository
from sweem.application.services.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    paginate,
)
from sweem.domain.exceptions import ValidationException


def _check_project_counts(total: int, completed: int) -> None:
    if total < 0 or completed < 0:
        raise ValidationException("Project counts cannot be negative")
    if completed > total:
        raise ValidationException(
            "projects_completed cannot exceed projects_total",
            field="projects_completed",
        )


class ClientService:
    """Clients: create, get, list, update, delete."""

    def __init__(self, client_repo: IClientRepository) -> None:
        self._client_repo = client_repo

    async def create(self, data: ClientCreate) -> UUID:
        """Create a client and return its new id."""
        _check_project_counts(data.projects_total, data.projects_completed)
        created = await self._client_repo.create_client(data)
        return created.id

    async def get_by_id(self, client_id: UUID) -> ClientResult | None:
        return await self._client_repo.get_client(client_id)

    async def get_all(
        self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE
    ) -> PaginatedResult[ClientResult]:
        return await paginate(
            self._client_repo.count, self._client_repo.list_clients, page, page_size
        )

    async def update(
        self, client_id: UUID, changes: ClientUpdate
    ) -> ClientResult | None:
        """Apply a partial update. Returns None (and writes nothing) if the client is absent."""
        current = await self._client_repo.get_client(client_id)
        if current is None:
            return None
        _check_project_counts(
            changes.get("projects_total", current.projects_total),
            changes.get("projects_completed", current.projects_completed),
        )
        return await self._client_repo.update_client(client_id, changes)

    async def delete(self, client_id: UUID) -> bool:
        return await self._client_repo.delete_client(client_id)
