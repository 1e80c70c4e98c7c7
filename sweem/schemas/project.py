"""Project API schemas."""

from datetime import date
from typing import ClassVar, Self
from uuid import UUID

from pydantic import model_validator

from sweem.schemas.common import CamelModel, NonBlankStr, PartialUpdateModel


class ProjectCreateRequest(CamelModel):
    """Request body for creating a project."""

    client_id: UUID
    name: NonBlankStr
    start_date: date
    planned_end_date: date
    actual_end_date: date | None = None
    manager_id: UUID

    @model_validator(mode="after")
    def end_not_before_start(self) -> Self:
        if self.planned_end_date < self.start_date:
            raise ValueError("plannedEndDate must not be before startDate")
        return self


class ProjectUpdateRequest(PartialUpdateModel):
    """Request body for PUT /projects/{id} (partial). actualEndDate may be cleared with null."""

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"client_id", "name", "start_date", "planned_end_date", "manager_id"}
    )

    client_id: UUID | None = None
    name: NonBlankStr | None = None
    start_date: date | None = None
    planned_end_date: date | None = None
    actual_end_date: date | None = None
    manager_id: UUID | None = None


class ProjectResponse(CamelModel):
    """Project response."""

    id: UUID
    client_id: UUID
    name: str
    start_date: date
    planned_end_date: date
    actual_end_date: date | None
    manager_id: UUID
