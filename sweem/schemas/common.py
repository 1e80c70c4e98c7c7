"""Shared schema bases: camelCase model, partial-update model, paging envelope."""

from collections.abc import Callable
from typing import Annotated, Any, ClassVar, Generic, Self, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StringConstraints, model_validator
from pydantic.alias_generators import to_camel

from sweem.application.dtos.pagination import PaginatedResult

T = TypeVar("T")

NonBlankStr = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)
]


class CamelModel(BaseModel):
    """Serializes as camelCase; accepts camelCase or snake_case on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdateModel(CamelModel):
    """Request body for PUT (partial update). Only fields present in the JSON are applied.

    Fields listed in non_nullable may be omitted but not sent as null.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_columns(self) -> Self:
        for name in self.model_fields_set & self.non_nullable:
            if getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def to_changes(self) -> dict[str, Any]:
        """Return {field: value} for the fields the client actually sent."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class CreatedResponse(CamelModel):
    """Id of a newly created resource."""

    id: UUID


class PaginatedResponse(CamelModel, Generic[T]):
    """One page of a listing."""

    items: list[T]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous: bool
    has_next: bool

    @classmethod
    def from_result(
        cls, result: PaginatedResult[Any], item: Callable[[Any], T]
    ) -> "PaginatedResponse[T]":
        """Build from an application PaginatedResult, mapping each item."""
        return cls(
            items=[item(i) for i in result.items],
            page=result.page,
            page_size=result.page_size,
            total_count=result.total_count,
            total_pages=result.total_pages,
            has_previous=result.has_previous,
            has_next=result.has_next,
        )
