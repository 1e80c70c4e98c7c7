"""Integration tests for the entity services on in-memory SQLite."""

import asyncio
import uuid
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from sweem.application.dtos.client import ClientCreate
from sweem.application.dtos.project import ProjectCreate
from sweem.application.dtos.user import UserCreate
from sweem.application.services import (
    AuthService,
    ClientService,
    ProjectService,
    UserService,
)
from sweem.domain.enums import PasswordVerificationResult, Role
from sweem.domain.exceptions import (
    InvalidCredentialsException,
    LoginAlreadyExistsException,
    ValidationException,
)
from sweem.infrastructure.persistence import database
from sweem.infrastructure.persistence.repositories import (
    ClientRepository,
    ProjectRepository,
    UserRepository,
)
from sweem.infrastructure.security import BcryptPasswordHasher, TokenIssuer, TokenValidator


def _project_service(session: AsyncSession) -> ProjectService:
    return ProjectService(
        ProjectRepository(session), ClientRepository(session), UserRepository(session)
    )


class TestClientService:
    @pytest.mark.parametrize(("n", "page_size"), [(0, 10), (5, 10), (10, 10), (23, 10), (7, 3)])
    async def test_pages_cover_collection_once(
        self, db_session: AsyncSession, n: int, page_size: int
    ) -> None:
        service = ClientService(ClientRepository(db_session))
        ids = [await service.create(ClientCreate(name=f"c{i}")) for i in range(n)]
        collected: list[uuid.UUID] = []
        page = 1
        while True:
            result = await service.get_all(page=page, page_size=page_size)
            assert result.total_count == n
            assert len(result.items) == min(page_size, max(0, n - (page - 1) * page_size))
            collected.extend(c.id for c in result.items)
            if not result.has_next:
                break
            page += 1
        assert collected == ids

    async def test_page_past_end_is_empty(self, db_session: AsyncSession) -> None:
        service = ClientService(ClientRepository(db_session))
        await service.create(ClientCreate(name="only"))
        result = await service.get_all(page=4, page_size=10)
        assert result.items == []
        assert result.total_count == 1

    async def test_create_rejects_completed_above_total(self, db_session: AsyncSession) -> None:
        service = ClientService(ClientRepository(db_session))
        with pytest.raises(ValidationException):
            await service.create(ClientCreate(name="Acme", projects_total=1, projects_completed=2))

    async def test_update_validates_merged_counts(self, db_session: AsyncSession) -> None:
        service = ClientService(ClientRepository(db_session))
        client_id = await service.create(ClientCreate(name="Acme", projects_total=2))
        with pytest.raises(ValidationException):
            await service.update(client_id, {"projects_completed": 3})
        updated = await service.update(client_id, {"projects_completed": 2})
        assert updated is not None
        assert updated.projects_completed == 2

    async def test_update_missing_returns_none(self, db_session: AsyncSession) -> None:
        service = ClientService(ClientRepository(db_session))
        assert await service.update(uuid.uuid4(), {"name": "Ghost"}) is None
        assert (await service.get_all()).total_count == 0


class TestProjectService:
    async def test_create_requires_existing_client_and_manager(
        self, db_session: AsyncSession
    ) -> None:
        service = _project_service(db_session)
        data = ProjectCreate(
            client_id=uuid.uuid4(),
            name="Website",
            start_date=date(2025, 1, 1),
            planned_end_date=date(2025, 2, 1),
            manager_id=uuid.uuid4(),
        )
        with pytest.raises(ValidationException) as exc_info:
            await service.create(data)
        assert exc_info.value.details == {"field": "client_id"}

    async def test_create_and_update_dates(self, db_session: AsyncSession) -> None:
        client_id = await ClientService(ClientRepository(db_session)).create(
            ClientCreate(name="Acme")
        )
        manager = await UserRepository(db_session).create_user(
            "Manager", "manager", "hash", Role.MANAGER
        )
        service = _project_service(db_session)
        project_id = await service.create(
            ProjectCreate(
                client_id=client_id,
                name="Website",
                start_date=date(2025, 1, 1),
                planned_end_date=date(2025, 2, 1),
                manager_id=manager.id,
            )
        )
        with pytest.raises(ValidationException):
            await service.update(project_id, {"planned_end_date": date(2024, 12, 31)})
        with pytest.raises(ValidationException):
            await service.update(project_id, {"manager_id": uuid.uuid4()})
        updated = await service.update(project_id, {"name": "Web shop"})
        assert updated is not None
        assert updated.name == "Web shop"
        assert updated.client_id == client_id


class TestUserService:
    async def test_create_hashes_password(
        self, db_session: AsyncSession, hasher: BcryptPasswordHasher
    ) -> None:
        service = UserService(UserRepository(db_session), hasher)
        await service.create(UserCreate(name="Alice", login="alice", password="password123"))
        user, password_hash = await UserRepository(db_session).get_credentials_by_login("alice")
        assert password_hash != "password123"
        assert hasher.verify(password_hash, "password123") is PasswordVerificationResult.SUCCESS
        assert user.role is Role.MEMBER

    async def test_update_password_rehashes(
        self, db_session: AsyncSession, hasher: BcryptPasswordHasher
    ) -> None:
        service = UserService(UserRepository(db_session), hasher)
        user_id = await service.create(
            UserCreate(name="Alice", login="alice", password="password123")
        )
        await service.update(user_id, {"password": "new-password-1"})
        _, password_hash = await UserRepository(db_session).get_credentials_by_login("alice")
        assert hasher.verify(password_hash, "new-password-1") is PasswordVerificationResult.SUCCESS
        assert hasher.verify(password_hash, "password123") is PasswordVerificationResult.FAILED

    async def test_duplicate_login(
        self, db_session: AsyncSession, hasher: BcryptPasswordHasher
    ) -> None:
        service = UserService(UserRepository(db_session), hasher)
        await service.create(UserCreate(name="Alice", login="alice", password="password123"))
        with pytest.raises(LoginAlreadyExistsException):
            await service.create(UserCreate(name="Alice 2", login="alice", password="password123"))

    async def test_update_missing_returns_none(
        self, db_session: AsyncSession, hasher: BcryptPasswordHasher
    ) -> None:
        service = UserService(UserRepository(db_session), hasher)
        assert await service.update(uuid.uuid4(), {"name": "Ghost"}) is None

    async def test_whitespace_only_password_rejected(
        self, db_session: AsyncSession, hasher: BcryptPasswordHasher
    ) -> None:
        service = UserService(UserRepository(db_session), hasher)
        with pytest.raises(ValidationException):
            await service.create(UserCreate(name="Bob", login="bob", password="        "))
        assert (await service.get_all()).total_count == 0
        user_id = await service.create(
            UserCreate(name="Bob", login="bob", password="password123")
        )
        with pytest.raises(ValidationException):
            await service.update(user_id, {"password": "   "})


class TestAuthService:
    async def test_login_issues_token_for_stored_user(
        self, db_session: AsyncSession, hasher: BcryptPasswordHasher
    ) -> None:
        key, issuer, audience = "k" * 40, "iss", "aud"
        user_id = await UserService(UserRepository(db_session), hasher).create(
            UserCreate(name="Alice", login="alice", password="password123", role=Role.ADMIN)
        )
        service = AuthService(
            UserRepository(db_session), hasher, TokenIssuer(key, issuer, audience)
        )
        token = await service.login("alice", "password123")
        claims = TokenValidator(key, issuer, audience).validate(token)
        assert claims.subject_id == user_id
        assert claims.role is Role.ADMIN
        with pytest.raises(InvalidCredentialsException):
            await service.login("alice", "wrong-password")


class _StallingClientRepository(ClientRepository):
    """Flushes the insert, signals, then waits forever (until cancelled)."""

    def __init__(self, db: AsyncSession, flushed: asyncio.Event) -> None:
        super().__init__(db)
        self._flushed = flushed

    async def create_client(self, data: ClientCreate):
        created = await super().create_client(data)
        self._flushed.set()
        await asyncio.Event().wait()
        return created


async def test_cancelled_create_leaves_nothing_behind() -> None:
    """Cancelling mid-operation raises CancelledError and rolls the insert back."""
    flushed = asyncio.Event()

    async def create_in_transaction() -> None:
        assert database.AsyncSessionLocal is not None
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                service = ClientService(_StallingClientRepository(session, flushed))
                await service.create(ClientCreate(name="Never"))

    task = asyncio.create_task(create_in_transaction())
    await flushed.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        assert await ClientRepository(session).count() == 0
