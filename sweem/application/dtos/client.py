"""DTOs for client use cases."""

from dataclasses import dataclass
from typing import TypedDict
from uuid import UUID


@dataclass(frozen=True)
class ClientCreate:
    """Fields for a new client."""

    name: str
    address: str | None = None
    projects_total: int = 0
    projects_completed: int = 0


class ClientUpdate(TypedDict, total=False):
    """Partial update: only keys present are applied (None clears address)."""

    name: str
    address: str | None
    projects_total: int
    projects_completed: int


@dataclass(frozen=True)
class ClientResult:
    """Client read-model."""

    id: UUID
    name: str
    address: str | None
    projects_total: int
    projects_completed: int
