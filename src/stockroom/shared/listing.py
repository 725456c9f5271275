"""Filtered, sorted and paginated queries over an aggregate repository.

The engine knows nothing about stores or products. Each entity describes
itself with a `Listing` (searchable fields, sortable columns) and hands the
engine a `ListQuery` plus the repository to read from.
"""

import operator
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import reduce
from typing import Any

from protean.utils.query import Q

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
TIE_BREAKER = "id"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortOrder:
    column: str
    direction: SortDirection = SortDirection.ASC

    @property
    def order_by(self) -> str:
        """The column in the `-column` notation repositories understand."""
        return self._notation(self.column)

    @property
    def keys(self) -> list[str]:
        """Sort keys, ending with the identifier to break ties between equal values."""
        return [self.order_by, self._notation(TIE_BREAKER)]

    def _notation(self, column: str) -> str:
        if self.direction is SortDirection.DESC:
            return f"-{column}"
        return column


@dataclass(frozen=True)
class Listing:
    """How one entity type is searched and sorted.

    `sort_columns` maps the public sort field (as clients send it) to the
    attribute on the aggregate. `default_sort` must be one of its keys.
    """

    search_fields: tuple[str, ...]
    sort_columns: Mapping[str, str]
    default_sort: str = "name"

    def __post_init__(self):
        if self.default_sort not in self.sort_columns:
            raise ValueError(f"Default sort field '{self.default_sort}' is not a sortable column")
        if not self.search_fields:
            raise ValueError("A listing needs at least one searchable field")

    def resolve_sort(self, sort: str | None) -> SortOrder:
        """Parse `"<field>,<direction>"` into a column and direction.

        Unknown or missing fields fall back to the default column; any
        direction other than `desc` sorts ascending.
        """
        default_column = self.sort_columns[self.default_sort]
        if not sort:
            return SortOrder(default_column)

        field_name, _, direction = sort.partition(",")
        column = self.sort_columns.get(field_name.strip(), default_column)
        if direction.strip() == SortDirection.DESC.value:
            return SortOrder(column, SortDirection.DESC)
        return SortOrder(column)


@dataclass(frozen=True)
class ListQuery:
    """A normalized list request: filters, sort and page window.

    `equals`, `at_least` and `at_most` map aggregate attributes to values;
    entries whose value is None are treated as absent.
    """

    q: str | None = None
    equals: Mapping[str, Any] = field(default_factory=dict)
    at_least: Mapping[str, Any] = field(default_factory=dict)
    at_most: Mapping[str, Any] = field(default_factory=dict)
    sort: str | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page:
    items: list
    total: int
    page: int
    limit: int


def search_criteria(term: str, fields: tuple[str, ...]) -> Q:
    """Substring match of `term` against any of `fields`, ignoring case."""
    return reduce(operator.or_, (Q(**{f"{name}__icontains": term}) for name in fields))


def apply_filters(queryset, query: ListQuery, listing: Listing):
    """Narrow `queryset` by every filter present in `query`, ANDed together."""
    if query.q:
        queryset = queryset.filter(search_criteria(query.q, listing.search_fields))

    lookups = {name: value for name, value in query.equals.items() if value is not None}
    lookups.update({f"{name}__gte": value for name, value in query.at_least.items() if value is not None})
    lookups.update({f"{name}__lte": value for name, value in query.at_most.items() if value is not None})
    if lookups:
        queryset = queryset.filter(**lookups)

    return queryset


def run_list_query(repository, query: ListQuery, listing: Listing) -> Page:
    """Return one page of matching aggregates and the total match count.

    `total` counts every aggregate that satisfies the filters, regardless of
    the page window.
    """
    queryset = apply_filters(repository._dao.query, query, listing)
    order = listing.resolve_sort(query.sort)

    result = queryset.order_by(order.keys).offset(query.offset).limit(query.limit).all()
    return Page(items=list(result.items), total=result.total, page=query.page, limit=query.limit)


def fetch_all(queryset) -> list:
    """Materialize every row of `queryset`, past the repository's default page size."""
    total = queryset.all().total
    if not total:
        return []
    return list(queryset.limit(total).all().items)
