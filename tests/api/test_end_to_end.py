"""Login, then use the token to page through clients."""

from collections.abc import Awaitable, Callable

from httpx import AsyncClient

from sweem.domain.enums import Role


async def test_login_then_list_clients(
    client: AsyncClient, user_factory: Callable[..., Awaitable]
) -> None:
    await user_factory("alice", "password123", name="Alice", role=Role.ADMIN)

    unauthenticated = await client.get("/clients")
    assert unauthenticated.status_code == 401

    login = await client.post("/auth/login", json={"login": "alice", "password": "password123"})
    assert login.status_code == 200
    headers = {"Authorization": f"Bearer {login.json()['token']}"}

    for name in ("Acme", "Globex", "Initech"):
        assert (await client.post("/clients", json={"name": name}, headers=headers)).status_code == 201

    page = await client.get("/clients", params={"page": 1, "pageSize": 2}, headers=headers)
    assert page.status_code == 200
    body = page.json()
    assert [c["name"] for c in body["items"]] == ["Acme", "Globex"]
    assert body["totalCount"] == 3
    assert body["hasNext"] is True
