from collections.abc import Mapping, Sequence
from typing import Annotated, Any

from annotated_types import Ge, Le
from fastapi.params import Depends, Query
from sqlalchemy import ColumnElement, Select

from finance_tracker.schemas.base import BaseSchema
from finance_tracker.services.errors import InvalidOrderingError


type FilterType = ColumnElement[bool]


class PaginatedSchema(BaseSchema):
    # no limit returns every matching row
    limit: Annotated[int, Ge(ge=1), Le(le=100)] | None = None
    offset: Annotated[int, Ge(ge=0)] = 0
    ordering: str | None = None


def get_pagination(
    limit: Annotated[int | None, Query()] = None,
    offset: Annotated[int, Query()] = 0,
    ordering: str | None = None,
):
    return PaginatedSchema(
        limit=limit,
        offset=offset,
        ordering=ordering,
    )


Paginated = Annotated[PaginatedSchema, Depends(get_pagination)]


def resolve_ordering(
    ordering: str, ordering_mapping: Mapping[str, ColumnElement]
) -> ColumnElement:
    """Map ``"field"`` / ``"-field"`` to an ascending / descending column."""
    descending = ordering.startswith("-")
    key = ordering.removeprefix("-")
    if key not in ordering_mapping:
        raise InvalidOrderingError(
            f"Unsupported ordering {ordering!r}, expected one of: "
            + ", ".join(sorted(ordering_mapping))
        )
    column = ordering_mapping[key]
    return column.desc() if descending else column.asc()


def apply_pagination[Q: tuple[Any, ...]](
    query: Select[Q],
    page: PaginatedSchema,
    default_ordering: ColumnElement | Sequence[ColumnElement] | None = None,
    ordering_mapping: Mapping[str, ColumnElement] | Sequence[ColumnElement] | None = None,
) -> Select[Q]:
    query = query.offset(page.offset)
    if page.limit is not None:
        query = query.limit(page.limit)
    if ordering_mapping and page.ordering:
        if not isinstance(ordering_mapping, Mapping):
            ordering_mapping = {column.key: column for column in ordering_mapping}
        query = query.order_by(resolve_ordering(page.ordering, ordering_mapping))
    elif default_ordering is not None:
        if not isinstance(default_ordering, Sequence):
            default_ordering = [default_ordering]
        query = query.order_by(*default_ordering)
    return query
