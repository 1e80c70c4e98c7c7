"""Base repository: generic CRUD and paging over one ORM model.

Write methods flush inside the caller's transaction (get_db_transactional
commits). SQLAlchemy errors other than IntegrityError are wrapped once in
StorageException; IntegrityError propagates so subclasses can map constraint
violations to domain exceptions.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sweem.domain.exceptions import StorageException
from sweem.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


@asynccontextmanager
async def storage_errors(operation: str) -> AsyncIterator[None]:
    """Re-raise SQLAlchemyError (except IntegrityError) as StorageException."""
    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as e:
        raise StorageException(operation) from e


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, count, get_page, create, update, delete.

    Models are expected to carry the public ``id`` (UUID) and internal
    ``seq`` columns from EntityModel; listings are ordered by ``seq``.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @property
    def _resource_name(self) -> str:
        return self.model.__name__.lower()

    async def get_by_id(self, entity_id: UUID) -> ModelType | None:
        """Return a single record by public id, or None."""
        model: Any = self.model
        async with storage_errors(f"get {self._resource_name}"):
            result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def exists(self, entity_id: UUID) -> bool:
        """Return True if a record with this public id exists."""
        model: Any = self.model
        async with storage_errors(f"get {self._resource_name}"):
            result = await self.db.execute(
                select(func.count()).select_from(self.model).where(model.id == entity_id)
            )
        return bool(result.scalar())

    async def count(self) -> int:
        """Return total number of records (COUNT query, no rows loaded)."""
        async with storage_errors(f"count {self._resource_name}"):
            result = await self.db.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    async def get_page(self, skip: int = 0, limit: int = 10) -> list[ModelType]:
        """Return records skip..skip+limit in insertion order (bounded range fetch)."""
        model: Any = self.model
        async with storage_errors(f"list {self._resource_name}"):
            result = await self.db.execute(
                select(self.model).order_by(model.seq).offset(skip).limit(limit)
            )
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it with generated columns loaded."""
        async with storage_errors(f"create {self._resource_name}"):
            self.db.add(obj)
            await self.db.flush()
            await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record and reload it."""
        async with storage_errors(f"update {self._resource_name}"):
            await self.db.flush()
            await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        async with storage_errors(f"delete {self._resource_name}"):
            await self.db.delete(obj)
            await self.db.flush()

    @staticmethod
    def apply_changes(obj: Any, changes: dict[str, Any]) -> None:
        """Set each attribute in changes on obj."""
        for key, value in changes.items():
            setattr(obj, key, value)
