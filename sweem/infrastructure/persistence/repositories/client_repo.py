"""Client repository. Interface methods return application DTOs."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from sweem.application.dtos.client import ClientCreate, ClientResult, ClientUpdate
from sweem.infrastructure.persistence.models.client import Client
from sweem.infrastructure.persistence.repositories.base import BaseRepository


def _client_to_result(c: Client) -> ClientResult:
    """Map ORM Client to application ClientResult."""
    return ClientResult(
        id=c.id,
        name=c.name,
        address=c.address,
        projects_total=c.projects_total,
        projects_completed=c.projects_completed,
    )


class ClientRepository(BaseRepository[Client]):
    """Client repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Client)

    async def create_client(self, data: ClientCreate) -> ClientResult:
        client = Client(
            name=data.name,
            address=data.address,
            projects_total=data.projects_total,
            projects_completed=data.projects_completed,
        )
        created = await self.create(client)
        return _client_to_result(created)

    async def get_client(self, client_id: UUID) -> ClientResult | None:
        client = await self.get_by_id(client_id)
        return _client_to_result(client) if client else None

    async def list_clients(self, skip: int, limit: int) -> list[ClientResult]:
        return [_client_to_result(c) for c in await self.get_page(skip, limit)]

    async def update_client(
        self, client_id: UUID, changes: ClientUpdate
    ) -> ClientResult | None:
        client = await self.get_by_id(client_id)
        if not client:
            return None
        self.apply_changes(client, dict(changes))
        updated = await self.update(client)
        return _client_to_result(updated)

    async def delete_client(self, client_id: UUID) -> bool:
        """Delete client; its projects go with it (ON DELETE CASCADE)."""
        client = await self.get_by_id(client_id)
        if not client:
            return False
        await self.delete(client)
        return True
