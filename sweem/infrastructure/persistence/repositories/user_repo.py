"""User repository (credential store). Interface methods return application DTOs.

Password hashes are written and read here but never leave through a UserResult;
get_credentials_by_login is the only method that returns one, for the login flow.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sweem.application.dtos.user import UserResult
from sweem.domain.enums import Role
from sweem.domain.exceptions import LoginAlreadyExistsException, ResourceInUseException
from sweem.infrastructure.persistence.models.user import User
from sweem.infrastructure.persistence.repositories.base import (
    BaseRepository,
    storage_errors,
)


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult (no password hash)."""
    return UserResult(
        id=u.id,
        name=u.name,
        login=u.login,
        role=u.role,
    )


class UserRepository(BaseRepository[User]):
    """User repository. Create, look up by login, update, delete."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_login(self, login: str) -> User | None:
        """Exact, case-sensitive login match."""
        async with storage_errors("get user"):
            result = await self.db.execute(select(User).where(User.login == login))
        return result.scalar_one_or_none()

    async def get_credentials_by_login(
        self, login: str
    ) -> tuple[UserResult, str] | None:
        user = await self.get_by_login(login)
        if not user:
            return None
        return _user_to_result(user), user.password_hash

    async def get_user(self, user_id: UUID) -> UserResult | None:
        user = await self.get_by_id(user_id)
        return _user_to_result(user) if user else None

    async def list_users(self, skip: int, limit: int) -> list[UserResult]:
        return [_user_to_result(u) for u in await self.get_page(skip, limit)]

    async def create_user(
        self, name: str, login: str, password_hash: str, role: Role
    ) -> UserResult:
        """Create user; raise LoginAlreadyExistsException on unique constraint violation."""
        user = User(name=name, login=login, password_hash=password_hash, role=role)
        try:
            created = await self.create(user)
        except IntegrityError:
            raise LoginAlreadyExistsException() from None
        return _user_to_result(created)

    async def update_user(
        self,
        user_id: UUID,
        *,
        name: str | None = None,
        login: str | None = None,
        password_hash: str | None = None,
        role: Role | None = None,
    ) -> UserResult | None:
        """Update non-None fields; raise LoginAlreadyExistsException on duplicate login."""
        user = await self.get_by_id(user_id)
        if not user:
            return None
        changes = {
            "name": name,
            "login": login,
            "password_hash": password_hash,
            "role": role,
        }
        self.apply_changes(user, {k: v for k, v in changes.items() if v is not None})
        try:
            updated = await self.update(user)
        except IntegrityError:
            raise LoginAlreadyExistsException() from None
        return _user_to_result(updated)

    async def delete_user(self, user_id: UUID) -> bool:
        """Delete user; raise ResourceInUseException while they still manage projects."""
        user = await self.get_by_id(user_id)
        if not user:
            return False
        try:
            await self.delete(user)
        except IntegrityError:
            raise ResourceInUseException("user", str(user_id)) from None
        return True
