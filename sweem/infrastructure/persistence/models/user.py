"""User ORM model (credential store)."""

from sqlalchemy import Enum as SAEnum
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from sweem.domain.enums import Role
from sweem.infrastructure.persistence.database import Base
from sweem.infrastructure.persistence.models.mixins import EntityModel


class User(EntityModel, Base):
    """User model. Table: app_user. Login is unique (case-sensitive)."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    login: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, name="user_role", values_callable=lambda e: e.values()),
        nullable=False,
        default=Role.MEMBER,
    )
