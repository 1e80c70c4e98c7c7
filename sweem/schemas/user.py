"""User API schemas."""

from typing import Annotated, ClassVar
from uuid import UUID

from pydantic import AfterValidator, StringConstraints

from sweem.domain.enums import Role
from sweem.schemas.common import CamelModel, NonBlankStr, PartialUpdateModel

LoginStr = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]


def _not_blank(password: str) -> str:
    if not password.strip():
        raise ValueError("password cannot be only whitespace")
    return password


PasswordStr = Annotated[
    str, StringConstraints(min_length=8, max_length=128), AfterValidator(_not_blank)
]


class UserCreateRequest(CamelModel):
    """Request body for creating a user. Password 8-128 characters, not only whitespace."""

    name: NonBlankStr
    login: LoginStr
    password: PasswordStr
    role: Role = Role.MEMBER


class UserUpdateRequest(PartialUpdateModel):
    """Request body for PUT /users/{id} (partial). A password, if sent, replaces the old one."""

    non_nullable: ClassVar[frozenset[str]] = frozenset(
        {"name", "login", "password", "role"}
    )

    name: NonBlankStr | None = None
    login: LoginStr | None = None
    password: PasswordStr | None = None
    role: Role | None = None


class UserResponse(CamelModel):
    """User response (no password)."""

    id: UUID
    name: str
    login: str
    role: Role
