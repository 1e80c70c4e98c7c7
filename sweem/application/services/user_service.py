"""User application service: CRUD and paginated listing.

Plaintext passwords are hashed (in a worker thread, bcrypt is CPU-bound)
before they reach the repository and are never stored or returned.
"""

from __future__ import annotations

import asyncio
from uuid import UUID

from sweem.application.dtos.pagination import PaginatedResult
from sweem.application.dtos.user import UserCreate, UserResult, UserUpdate
from sweem.application.interfaces.repositories import IUserRepository
from sweem.application.interfaces.services import IPasswordHasher
from sweem.application.services.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    paginate,
)
from sweem.domain.exceptions import ValidationException


def _check_password(password: str) -> None:
    # Login rejects whitespace-only passwords, so such an account could never sign in.
    if not password.strip():
        raise ValidationException("password cannot be only whitespace", field="password")


class UserService:
    """Users: create, get, list, update, delete."""

    def __init__(self, user_repo: IUserRepository, hasher: IPasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    async def create(self, data: UserCreate) -> UUID:
        """Hash the password, create the user and return its new id.

        Raises:
            LoginAlreadyExistsException: If the login is taken.
        """
        _check_password(data.password)
        password_hash = await asyncio.to_thread(self._hasher.hash, data.password)
        created = await self._user_repo.create_user(
            name=data.name,
            login=data.login,
            password_hash=password_hash,
            role=data.role,
        )
        return created.id

    async def get_by_id(self, user_id: UUID) -> UserResult | None:
        return await self._user_repo.get_user(user_id)

    async def get_all(
        self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE
    ) -> PaginatedResult[UserResult]:
        return await paginate(
            self._user_repo.count, self._user_repo.list_users, page, page_size
        )

    async def update(self, user_id: UUID, changes: UserUpdate) -> UserResult | None:
        """Apply a partial update; a new password is re-hashed. None if the user is absent."""
        if not await self._user_repo.exists(user_id):
            return None
        password_hash = None
        if "password" in changes:
            _check_password(changes["password"])
            password_hash = await asyncio.to_thread(
                self._hasher.hash, changes["password"]
            )
        return await self._user_repo.update_user(
            user_id,
            name=changes.get("name"),
            login=changes.get("login"),
            password_hash=password_hash,
            role=changes.get("role"),
        )

    async def delete(self, user_id: UUID) -> bool:
        """Delete the user. Raises ResourceInUseException while they manage projects."""
        return await self._user_repo.delete_user(user_id)
