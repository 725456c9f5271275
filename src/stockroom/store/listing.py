"""Store list queries."""

from dataclasses import dataclass

from stockroom.shared.listing import DEFAULT_LIMIT, DEFAULT_PAGE, ListQuery, Listing, Page, run_list_query
from stockroom.store.store import StoreStatus

STORE_LISTING = Listing(
    search_fields=("name",),
    sort_columns={
        "name": "name",
        "location": "location",
        "manager": "manager",
        "status": "status",
        "createdAt": "created_at",
    },
    default_sort="name",
)


@dataclass(frozen=True)
class StoreQuery:
    q: str | None = None
    status: StoreStatus | None = None
    sort: str | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def as_list_query(self) -> ListQuery:
        return ListQuery(
            q=self.q,
            equals={"status": self.status.value if self.status else None},
            sort=self.sort,
            page=self.page,
            limit=self.limit,
        )


def list_stores(repository, query: StoreQuery) -> Page:
    return run_list_query(repository, query.as_list_query(), STORE_LISTING)
