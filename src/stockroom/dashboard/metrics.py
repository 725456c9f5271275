"""Inventory-wide figures for the dashboard."""

from collections import Counter
from dataclasses import dataclass, field

from stockroom.product.product import StockStatus
from stockroom.shared.listing import fetch_all
from stockroom.store.store import StoreStatus

_PROBLEM_STATUSES = (StockStatus.LOW_STOCK.value, StockStatus.OUT_OF_STOCK.value)


@dataclass(frozen=True)
class LowStockEntry:
    id: str
    name: str
    sku: str
    quantity: int
    min_stock: int
    status: str
    store_name: str | None


@dataclass(frozen=True)
class DashboardMetrics:
    total_stores: int = 0
    active_stores: int = 0
    total_products: int = 0
    inventory_value: float = 0.0
    low_stock_count: int = 0
    out_of_stock_count: int = 0
    category_counts: dict[str, int] = field(default_factory=dict)
    low_stock_products: list[LowStockEntry] = field(default_factory=list)


def collect_dashboard_metrics(store_repository, product_repository) -> DashboardMetrics:
    """Compute store counts, stock value and the products that need reordering.

    `category_counts` only lists categories that have at least one product.
    `low_stock_products` holds every low or out-of-stock product, emptiest
    first.
    """
    stores = store_repository._dao.query
    products = fetch_all(product_repository._dao.query)

    statuses = Counter(product.status for product in products)
    categories = Counter(product.category for product in products)

    problems = sorted(
        (product for product in products if product.status in _PROBLEM_STATUSES),
        key=lambda product: product.quantity,
    )
    store_names = store_repository.names_for(product.store_id for product in problems)

    return DashboardMetrics(
        total_stores=stores.all().total,
        active_stores=stores.filter(status=StoreStatus.ACTIVE.value).all().total,
        total_products=len(products),
        inventory_value=sum(product.price * product.quantity for product in products),
        low_stock_count=statuses[StockStatus.LOW_STOCK.value],
        out_of_stock_count=statuses[StockStatus.OUT_OF_STOCK.value],
        category_counts=dict(categories),
        low_stock_products=[
            LowStockEntry(
                id=str(product.id),
                name=product.name,
                sku=product.sku,
                quantity=product.quantity,
                min_stock=product.min_stock,
                status=product.status,
                store_name=store_names.get(str(product.store_id)),
            )
            for product in problems
        ],
    )
