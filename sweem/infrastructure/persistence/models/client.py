"""Client ORM model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sweem.infrastructure.persistence.database import Base
from sweem.infrastructure.persistence.models.mixins import EntityModel


class Client(EntityModel, Base):
    """Client (customer) of the organisation. Table: client."""

    __tablename__ = "client"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    projects_total: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    projects_completed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0
    )
