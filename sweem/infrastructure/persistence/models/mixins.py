"""SQLAlchemy mixins for common model patterns.

Provides: SequenceMixin (internal insertion-order key), PublicIdMixin (UUID
exposed through the API), TimestampMixin, and the combined EntityModel.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, Uuid
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class SequenceMixin:
    """Integer surrogate primary key. Orders listings by insertion; never exposed."""

    @declared_attr
    def seq(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class PublicIdMixin:
    """Opaque UUID identity used in URLs, DTOs and the JWT subject claim."""

    @declared_attr
    def id(cls) -> Mapped[uuid.UUID]:
        return mapped_column(
            Uuid, unique=True, index=True, nullable=False, default=uuid.uuid4
        )


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class EntityModel(SequenceMixin, PublicIdMixin, TimestampMixin):
    """seq + id + timestamps (every SWEeM table)."""
