"""Per-store stock summary shown on the store detail page."""

from dataclasses import dataclass

from stockroom.product.product import StockStatus


@dataclass(frozen=True)
class ProductSummary:
    total: int = 0
    low_stock: int = 0
    out_of_stock: int = 0


def summarize_products(product_repository, store_id) -> ProductSummary:
    """Count a store's products overall and per problem status.

    A store without products yields the zero summary. Whether the store
    exists at all is the caller's concern.
    """
    products = product_repository._dao.query.filter(store_id=str(store_id))
    return ProductSummary(
        total=products.all().total,
        low_stock=products.filter(status=StockStatus.LOW_STOCK.value).all().total,
        out_of_stock=products.filter(status=StockStatus.OUT_OF_STOCK.value).all().total,
    )
