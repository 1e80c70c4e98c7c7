"""Client API: thin routes delegating to ClientService. Requires a bearer token."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from sweem.api.v1.dependencies import get_client_service, get_client_service_for_write
from sweem.application.dtos.client import ClientCreate, ClientUpdate
from sweem.application.services import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, ClientService
from sweem.application.services.pagination import MAX_PAGE_SIZE
from sweem.domain.exceptions import ResourceNotFoundException
from sweem.schemas.client import (
    ClientCreateRequest,
    ClientResponse,
    ClientUpdateRequest,
)
from sweem.schemas.common import CreatedResponse, PaginatedResponse

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=201)
async def create_client(
    body: ClientCreateRequest,
    service: Annotated[ClientService, Depends(get_client_service_for_write)],
):
    """Create a client; returns its id."""
    client_id = await service.create(ClientCreate(**body.model_dump()))
    return CreatedResponse(id=client_id)


@router.get("", response_model=PaginatedResponse[ClientResponse])
async def list_clients(
    service: Annotated[ClientService, Depends(get_client_service)],
    page: int = Query(DEFAULT_PAGE, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
):
    """List clients in creation order (paginated)."""
    result = await service.get_all(page=page, page_size=page_size)
    return PaginatedResponse[ClientResponse].from_result(
        result, ClientResponse.model_validate
    )


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: UUID,
    service: Annotated[ClientService, Depends(get_client_service)],
):
    """Get client by id."""
    client = await service.get_by_id(client_id)
    if client is None:
        raise ResourceNotFoundException("client", str(client_id))
    return ClientResponse.model_validate(client)


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: UUID,
    body: ClientUpdateRequest,
    service: Annotated[ClientService, Depends(get_client_service_for_write)],
):
    """Update client (partial). Only fields present in the body are changed."""
    updated = await service.update(client_id, ClientUpdate(**body.to_changes()))
    if updated is None:
        raise ResourceNotFoundException("client", str(client_id))
    return ClientResponse.model_validate(updated)


@router.delete("/{client_id}", status_code=204)
async def delete_client(
    client_id: UUID,
    service: Annotated[ClientService, Depends(get_client_service_for_write)],
):
    """Delete client and its projects."""
    if not await service.delete(client_id):
        raise ResourceNotFoundException("client", str(client_id))
    return Response(status_code=204)
