"""Client API schemas."""

from typing import ClassVar, Self
from uuid import UUID

from pydantic import Field, model_validator

from sweem.schemas.common import CamelModel, NonBlankStr, PartialUpdateModel


class ClientCreateRequest(CamelModel):
    """Request body for creating a client."""

    name: NonBlankStr
    address: str | None = Field(default=None, max_length=500)
    projects_total: int = Field(default=0, ge=0)
    projects_completed: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def completed_within_total(self) -> Self:
        if self.projects_completed > self.projects_total:
            raise ValueError("projectsCompleted cannot exceed projectsTotal")
        return self


class ClientUpdateRequest(PartialUpdateModel):
    """Request body for PUT /clients/{id} (partial). address may be cleared with null."""

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"name", "projects_total", "projects_completed"}
    )

    name: NonBlankStr | None = None
    address: str | None = Field(default=None, max_length=500)
    projects_total: int | None = Field(default=None, ge=0)
    projects_completed: int | None = Field(default=None, ge=0)


class ClientResponse(CamelModel):
    """Client response."""

    id: UUID
    name: str
    address: str | None
    projects_total: int
    projects_completed: int
