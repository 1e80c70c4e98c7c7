"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from typing import TypedDict
from uuid import UUID

from sweem.domain.enums import Role


@dataclass(frozen=True)
class UserCreate:
    """Fields for a new user. password is plaintext and is hashed before persisting."""

    name: str
    login: str
    password: str = field(repr=False)
    role: Role = Role.MEMBER


class UserUpdate(TypedDict, total=False):
    """Partial update. A present password is re-hashed; it is never stored as given."""

    name: str
    login: str
    password: str
    role: Role


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, list, etc.). No password hash."""

    id: UUID
    name: str
    login: str
    role: Role
