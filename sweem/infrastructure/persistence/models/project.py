"""Project ORM model."""

import uuid
from datetime import date

from sqlalchemy import Date, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from sweem.infrastructure.persistence.database import Base
from sweem.infrastructure.persistence.models.mixins import EntityModel


class Project(EntityModel, Base):
    """Project for a client, run by a manager (user). Table: project.

    Deleting the client deletes its projects; a user cannot be deleted while
    managing a project (RESTRICT).
    """

    __tablename__ = "project"

    client_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("client.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    planned_end_date: Mapped[date] = mapped_column(Date, nullable=False)
    actual_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    manager_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("app_user.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
