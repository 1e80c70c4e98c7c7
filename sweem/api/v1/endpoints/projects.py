"""Project API: thin routes delegating to ProjectService. Requires a bearer token."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from sweem.api.v1.dependencies import get_project_service, get_project_service_for_write
from sweem.application.dtos.project import ProjectCreate, ProjectUpdate
from sweem.application.services import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, ProjectService
from sweem.application.services.pagination import MAX_PAGE_SIZE
from sweem.domain.exceptions import ResourceNotFoundException
from sweem.schemas.common import CreatedResponse, PaginatedResponse
from sweem.schemas.project import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_project(
    body: ProjectCreateRequest,
    service: Annotated[ProjectService, Depends(get_project_service_for_write)],
):
    """Create a project for an existing client and manager; returns its id."""
    project_id = await service.create(ProjectCreate(**body.model_dump()))
    return CreatedResponse(id=project_id)


@router.get("", response_model=PaginatedResponse[ProjectResponse])
async def list_projects(
    service: Annotated[ProjectService, Depends(get_project_service)],
    page: int = Query(DEFAULT_PAGE, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
):
    """List projects in creation order (paginated)."""
    result = await service.get_all(page=page, page_size=page_size)
    return PaginatedResponse[ProjectResponse].from_result(
        result, ProjectResponse.model_validate
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    service: Annotated[ProjectService, Depends(get_project_service)],
):
    """Get project by id."""
    project = await service.get_by_id(project_id)
    if project is None:
        raise ResourceNotFoundException("project", str(project_id))
    return ProjectResponse.model_validate(project)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    body: ProjectUpdateRequest,
    service: Annotated[ProjectService, Depends(get_project_service_for_write)],
):
    """Update project (partial). Only fields present in the body are changed."""
    updated = await service.update(project_id, ProjectUpdate(**body.to_changes()))
    if updated is None:
        raise ResourceNotFoundException("project", str(project_id))
    return ProjectResponse.model_validate(updated)


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: UUID,
    service: Annotated[ProjectService, Depends(get_project_service_for_write)],
):
    """Delete project."""
    if not await service.delete(project_id):
        raise ResourceNotFoundException("project", str(project_id))
    return Response(status_code=204)
