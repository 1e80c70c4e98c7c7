"""Project application service: CRUD and paginated listing.

Checks that the referenced client and manager exist and that the planned
end date is not before the start date.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

from sweem.application.dtos.pagination import PaginatedResult
from sweem.application.dtos.project import ProjectCreate, ProjectResult, ProjectUpdate
from sweem.application.interfaces.repositories import (
    IClientRepository,
    IProjectRepository,
    IUserRepository,
)
from sweem.application.services.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    paginate,
)
from sweem.domain.exceptions import ValidationException


def _check_dates(start_date: date, planned_end_date: date) -> None:
    if planned_end_date < start_date:
        raise ValidationException(
            "planned_end_date must not be before start_date",
            field="planned_end_date",
        )


class ProjectService:
    """Projects: create, get, list, update, delete."""

    def __init__(
        self,
        project_repo: IProjectRepository,
        client_repo: IClientRepository,
        user_repo: IUserRepository,
    ) -> None:
        self._project_repo = project_repo
        self._client_repo = client_repo
        self._user_repo = user_repo

    async def _check_references(
        self, client_id: UUID | None, manager_id: UUID | None
    ) -> None:
        if client_id is not None and await self._client_repo.get_client(client_id) is None:
            raise ValidationException("Client does not exist", field="client_id")
        if manager_id is not None and not await self._user_repo.exists(manager_id):
            raise ValidationException("Manager does not exist", field="manager_id")

    async def create(self, data: ProjectCreate) -> UUID:
        """Create a project and return its new id."""
        _check_dates(data.start_date, data.planned_end_date)
        await self._check_references(data.client_id, data.manager_id)
        created = await self._project_repo.create_project(data)
        return created.id

    async def get_by_id(self, project_id: UUID) -> ProjectResult | None:
        return await self._project_repo.get_project(project_id)

    async def get_all(
        self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE
    ) -> PaginatedResult[ProjectResult]:
        return await paginate(
            self._project_repo.count, self._project_repo.list_projects, page, page_size
        )

    async def update(
        self, project_id: UUID, changes: ProjectUpdate
    ) -> ProjectResult | None:
        """Apply a partial update. Returns None (and writes nothing) if the project is absent."""
        current = await self._project_repo.get_project(project_id)
        if current is None:
            return None
        _check_dates(
            changes.get("start_date", current.start_date),
            changes.get("planned_end_date", current.planned_end_date),
        )
        await self._check_references(
            changes.get("client_id"), changes.get("manager_id")
        )
        return await self._project_repo.update_project(project_id, changes)

    async def delete(self, project_id: UUID) -> bool:
        return await self._project_repo.delete_project(project_id)
