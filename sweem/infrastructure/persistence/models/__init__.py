"""ORM models. Importing this package registers every table on Base.metadata."""

from sweem.infrastructure.persistence.models.client import Client
from sweem.infrastructure.persistence.models.project import Project
from sweem.infrastructure.persistence.models.user import User

__all__ = ["Client", "Project", "User"]
