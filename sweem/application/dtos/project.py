"""DTOs for project use cases."""

from dataclasses import dataclass
from datetime import date
from typing import TypedDict
from uuid import UUID


@dataclass(frozen=True)
class ProjectCreate:
    """Fields for a new project."""

    client_id: UUID
    name: str
    start_date: date
    planned_end_date: date
    manager_id: UUID
    actual_end_date: date | None = None


class ProjectUpdate(TypedDict, total=False):
    """Partial update: only keys present are applied (None clears actual_end_date)."""

    client_id: UUID
    name: str
    start_date: date
    planned_end_date: date
    actual_end_date: date | None
    manager_id: UUID


@dataclass(frozen=True)
class ProjectResult:
    """Project read-model."""

    id: UUID
    client_id: UUID
    name: str
    start_date: date
    planned_end_date: date
    actual_end_date: date | None
    manager_id: UUID
