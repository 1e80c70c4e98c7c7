"""Project repository. Interface methods return application DTOs."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sweem.application.dtos.project import ProjectCreate, ProjectResult, ProjectUpdate
from sweem.domain.exceptions import ValidationException
from sweem.infrastructure.persistence.models.project import Project
from sweem.infrastructure.persistence.repositories.base import BaseRepository


def _project_to_result(p: Project) -> ProjectResult:
    """Map ORM Project to application ProjectResult."""
    return ProjectResult(
        id=p.id,
        client_id=p.client_id,
        name=p.name,
        start_date=p.start_date,
        planned_end_date=p.planned_end_date,
        actual_end_date=p.actual_end_date,
        manager_id=p.manager_id,
    )


class ProjectRepository(BaseRepository[Project]):
    """Project repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Project)

    async def create_project(self, data: ProjectCreate) -> ProjectResult:
        """Insert a project; a client_id or manager_id with no row raises ValidationException."""
        project = Project(
            client_id=data.client_id,
            name=data.name,
            start_date=data.start_date,
            planned_end_date=data.planned_end_date,
            actual_end_date=data.actual_end_date,
            manager_id=data.manager_id,
        )
        try:
            created = await self.create(project)
        except IntegrityError:
            raise ValidationException("Client or manager does not exist") from None
        return _project_to_result(created)

    async def get_project(self, project_id: UUID) -> ProjectResult | None:
        project = await self.get_by_id(project_id)
        return _project_to_result(project) if project else None

    async def list_projects(self, skip: int, limit: int) -> list[ProjectResult]:
        return [_project_to_result(p) for p in await self.get_page(skip, limit)]

    async def update_project(
        self, project_id: UUID, changes: ProjectUpdate
    ) -> ProjectResult | None:
        project = await self.get_by_id(project_id)
        if not project:
            return None
        self.apply_changes(project, dict(changes))
        try:
            updated = await self.update(project)
        except IntegrityError:
            raise ValidationException("Client or manager does not exist") from None
        return _project_to_result(updated)

    async def delete_project(self, project_id: UUID) -> bool:
        project = await self.get_by_id(project_id)
        if not project:
            return False
        await self.delete(project)
        return True
