"""Pytest configuration and fixtures for sweem.

Tests run against in-memory SQLite (one shared connection per test via
StaticPool). The schema is created before each test and the engine disposed
after it, which drops the database. Environment is set before any sweem
import so Settings validation passes.
"""

import os
import uuid

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_KEY"] = "test-signing-key-that-is-long-enough-0123456789"
os.environ["JWT_ISSUER"] = "sweem-tests"
os.environ["JWT_AUDIENCE"] = "sweem-tests-clients"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["CREATE_SCHEMA_ON_STARTUP"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from sweem.application.dtos.user import UserCreate  # noqa: E402
from sweem.application.services import UserService  # noqa: E402
from sweem.core.config import get_settings  # noqa: E402
from sweem.domain.enums import Role  # noqa: E402
from sweem.infrastructure.persistence import database  # noqa: E402
from sweem.infrastructure.persistence.repositories import UserRepository  # noqa: E402
from sweem.infrastructure.security import BcryptPasswordHasher  # noqa: E402

get_settings.cache_clear()

from sweem.main import app  # noqa: E402

TEST_PASSWORD = "password123"


@pytest.fixture(autouse=True)
async def _database():
    """Fresh schema per test; disposing the engine drops the in-memory database."""
    await database.create_schema()
    yield
    await database.dispose_engine()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/service tests. Rolls back after test."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


async def _create_user(
    login: str,
    password: str = TEST_PASSWORD,
    name: str | None = None,
    role: Role = Role.MEMBER,
) -> uuid.UUID:
    """Create and commit a user in its own session; return the new id."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            service = UserService(UserRepository(session), BcryptPasswordHasher(rounds=4))
            return await service.create(
                UserCreate(name=name or login.title(), login=login, password=password, role=role)
            )


@pytest.fixture
def user_factory():
    """Async callable that commits a user and returns its id (see _create_user)."""
    return _create_user


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Create a user, log in through the API, return the Authorization header."""
    login = f"user-{uuid.uuid4().hex[:8]}"
    await _create_user(login, role=Role.ADMIN)
    response = await client.post(
        "/auth/login", json={"login": login, "password": TEST_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}
