"""Product list queries."""

from dataclasses import dataclass

from stockroom.product.product import ProductCategory, StockStatus
from stockroom.shared.listing import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    ListQuery,
    Listing,
    Page,
    SortDirection,
    SortOrder,
    apply_filters,
    fetch_all,
    run_list_query,
)

# Not a product attribute: the name lives on the owning store
STORE_NAME = "store_name"

PRODUCT_LISTING = Listing(
    search_fields=("name", "sku"),
    sort_columns={
        "name": "name",
        "price": "price",
        "quantity": "quantity",
        "sku": "sku",
        "category": "category",
        "status": "status",
        "createdAt": "created_at",
        "storeName": STORE_NAME,
    },
    default_sort="name",
)


@dataclass(frozen=True)
class ProductQuery:
    q: str | None = None
    category: ProductCategory | None = None
    status: StockStatus | None = None
    store_id: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    sort: str | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def as_list_query(self) -> ListQuery:
        return ListQuery(
            q=self.q,
            equals={
                "category": self.category.value if self.category else None,
                "status": self.status.value if self.status else None,
                "store_id": self.store_id,
            },
            at_least={"price": self.min_price},
            at_most={"price": self.max_price},
            sort=self.sort,
            page=self.page,
            limit=self.limit,
        )


def list_products(repository, store_repository, query: ProductQuery) -> Page:
    list_query = query.as_list_query()
    order = PRODUCT_LISTING.resolve_sort(list_query.sort)
    if order.column == STORE_NAME:
        return _list_by_store_name(repository, store_repository, list_query, order)
    return run_list_query(repository, list_query, PRODUCT_LISTING)


def _list_by_store_name(repository, store_repository, query: ListQuery, order: SortOrder) -> Page:
    """Order matching products by their store's name, then by id.

    The store name is held by another aggregate, so the matching rows are
    read in full, sorted here and then windowed.
    """
    rows = fetch_all(apply_filters(repository._dao.query, query, PRODUCT_LISTING))
    names = store_repository.names_for(product.store_id for product in rows)

    rows.sort(
        key=lambda product: (names.get(str(product.store_id), ""), str(product.id)),
        reverse=order.direction is SortDirection.DESC,
    )
    window = rows[query.offset : query.offset + query.limit]
    return Page(items=window, total=len(rows), page=query.page, limit=query.limit)
