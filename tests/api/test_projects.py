"""Tests for /projects CRUD, reference checks and client cascade."""

import uuid

from httpx import AsyncClient


async def _client_and_manager(client: AsyncClient, headers: dict[str, str]) -> tuple[str, str]:
    client_id = (await client.post("/clients", json={"name": "Acme"}, headers=headers)).json()["id"]
    manager_id = (
        await client.post(
            "/users",
            json={"name": "Mia", "login": "mia", "password": "password123", "role": "Manager"},
            headers=headers,
        )
    ).json()["id"]
    return client_id, manager_id


def _project_body(client_id: str, manager_id: str, **overrides) -> dict:
    body = {
        "clientId": client_id,
        "name": "Website",
        "startDate": "2025-01-01",
        "plannedEndDate": "2025-03-31",
        "managerId": manager_id,
    }
    body.update(overrides)
    return body


async def test_project_crud(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    client_id, manager_id = await _client_and_manager(client, auth_headers)
    created = await client.post(
        "/projects", json=_project_body(client_id, manager_id), headers=auth_headers
    )
    assert created.status_code == 201
    project_id = created.json()["id"]

    fetched = (await client.get(f"/projects/{project_id}", headers=auth_headers)).json()
    assert fetched["clientId"] == client_id
    assert fetched["managerId"] == manager_id
    assert fetched["actualEndDate"] is None

    updated = await client.put(
        f"/projects/{project_id}", json={"actualEndDate": "2025-03-15"}, headers=auth_headers
    )
    assert updated.status_code == 200
    assert updated.json()["actualEndDate"] == "2025-03-15"

    listing = (await client.get("/projects", headers=auth_headers)).json()
    assert [p["id"] for p in listing["items"]] == [project_id]

    assert (await client.delete(f"/projects/{project_id}", headers=auth_headers)).status_code == 204
    assert (await client.get(f"/projects/{project_id}", headers=auth_headers)).status_code == 404


async def test_unknown_references_return_400(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    client_id, manager_id = await _client_and_manager(client, auth_headers)
    response = await client.post(
        "/projects",
        json=_project_body(str(uuid.uuid4()), manager_id),
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "client_id"}
    response = await client.post(
        "/projects",
        json=_project_body(client_id, str(uuid.uuid4())),
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "manager_id"}


async def test_end_before_start_returns_422(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    client_id, manager_id = await _client_and_manager(client, auth_headers)
    response = await client.post(
        "/projects",
        json=_project_body(client_id, manager_id, plannedEndDate="2024-12-31"),
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_deleting_client_deletes_its_projects(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    client_id, manager_id = await _client_and_manager(client, auth_headers)
    project_id = (
        await client.post("/projects", json=_project_body(client_id, manager_id), headers=auth_headers)
    ).json()["id"]
    assert (await client.delete(f"/clients/{client_id}", headers=auth_headers)).status_code == 204
    assert (await client.get(f"/projects/{project_id}", headers=auth_headers)).status_code == 404


async def test_manager_in_use_cannot_be_deleted(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    client_id, manager_id = await _client_and_manager(client, auth_headers)
    await client.post("/projects", json=_project_body(client_id, manager_id), headers=auth_headers)
    response = await client.delete(f"/users/{manager_id}", headers=auth_headers)
    assert response.status_code == 409
    assert response.json()["error"] == "RESOURCE_IN_USE"
    assert (await client.get(f"/users/{manager_id}", headers=auth_headers)).status_code == 200
